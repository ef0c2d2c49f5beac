"""Services for webcheck."""

from webcheck.services.dispatcher import Dispatcher, check_hosts, collect_results
from webcheck.services.probe import probe_port
from webcheck.services.resolver import HostResolver, ResolutionError
from webcheck.services.state import (
    get_dispatcher,
    get_settings,
    reset_state,
    set_dispatcher,
    set_settings,
)

__all__ = [
    "Dispatcher",
    "HostResolver",
    "ResolutionError",
    "check_hosts",
    "collect_results",
    "get_dispatcher",
    "get_settings",
    "probe_port",
    "reset_state",
    "set_dispatcher",
    "set_settings",
]
