"""Webcheck tool and resource handlers."""

import json
import logging

from fastmcp.exceptions import ResourceError, ToolError

from webcheck.services import collect_results
from webcheck.utils.formatting import format_result, format_results
from webcheck.utils.hostfile import HostListError, parse_hosts, require_hosts

logger = logging.getLogger(__name__)


async def webcheck(hosts: list[str], as_json: bool = False) -> str:
    """Resolve host names and report which ones answer on ports 80 or 443.

    Args:
        hosts: Host names to check. Blank entries and entries starting
            with "#" are ignored.
        as_json: Return a JSON array instead of formatted text.

    Returns:
        One block per host in completion order, or a JSON array of results.

    Raises:
        ToolError: If no host names remain after filtering
    """
    try:
        names = require_hosts(parse_hosts("\n".join(hosts)))
    except HostListError as e:
        raise ToolError(str(e)) from e

    logger.debug("Tool request for %d host(s) (as_json=%s)", len(names), as_json)
    results = await collect_results(names)

    if as_json:
        return json.dumps([r.to_dict() for r in results], indent=2)
    return format_results(results)


async def host_resource(host: str) -> str:
    """Check a single host.

    Args:
        host: Host name to check

    Returns:
        Formatted result for the host

    Raises:
        ResourceError: If host is blank or a comment
    """
    try:
        names = require_hosts(parse_hosts(host))
    except HostListError as e:
        raise ResourceError(f"Invalid host '{host}'") from e

    results = await collect_results(names[:1])
    return format_result(results[0])
