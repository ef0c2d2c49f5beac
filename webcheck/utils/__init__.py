"""Utilities for webcheck."""

from webcheck.utils.console import ColorfulFormatter, configure_logging
from webcheck.utils.formatting import format_result, format_results
from webcheck.utils.hostfile import (
    HostListError,
    parse_hosts,
    read_hosts_file,
    require_hosts,
)

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "format_result",
    "format_results",
    "HostListError",
    "parse_hosts",
    "read_hosts_file",
    "require_hosts",
]
