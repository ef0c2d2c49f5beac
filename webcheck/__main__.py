"""Entry point for webcheck.

    webcheck FILE      check every host listed in FILE and print the results
    webcheck --serve   run the MCP server on the configured transport
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from webcheck.services import check_hosts, get_settings
from webcheck.utils import (
    HostListError,
    configure_logging,
    format_result,
    read_hosts_file,
    require_hosts,
)

logger = logging.getLogger(__name__)

DESCRIPTION = "read list of hosts from file and report servers listening on ports 80 or 443."


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(prog="webcheck", description=DESCRIPTION)
    parser.add_argument(
        "file",
        nargs="?",
        help="file with one host name per line; blank lines and # comments are ignored",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="run the MCP server instead of checking a file",
    )
    return parser


async def run_checks(hosts: list[str]) -> None:
    """Print each result as soon as its check finishes."""
    async for result in check_hosts(hosts):
        print(format_result(result), flush=True)


def run_server() -> None:
    """Run the MCP server with configured transport."""
    from webcheck.server import mcp

    settings = get_settings()
    if settings.transport == "stdio":
        logger.info("Starting webcheck server (transport=stdio)")
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting webcheck server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        mcp.run(
            transport="http",
            host=settings.http_host,
            port=settings.http_port,
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_colors)

    if args.serve:
        run_server()
        return 0

    if not args.file:
        logger.error("missing required file argument")
        return 1

    try:
        hosts = require_hosts(read_hosts_file(args.file))
    except HostListError:
        logger.error("empty hosts file: %s", args.file)
        return 1
    except OSError as e:
        logger.error("could not read %s: %s", args.file, e)
        return 1

    asyncio.run(run_checks(hosts))
    return 0


if __name__ == "__main__":
    sys.exit(main())
