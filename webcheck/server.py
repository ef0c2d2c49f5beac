"""Webcheck FastMCP server.

This is a thin wrapper that wires together the MCP server with tools and resources.
All checking logic is delegated to the services/ modules.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from webcheck.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from webcheck.models import CANDIDATE_PORTS
from webcheck.services import get_settings
from webcheck.tools import host_resource, webcheck

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Log server startup and shutdown along with the active settings.

    Args:
        server: The FastMCP server instance

    Yields:
        Dict with the engine settings in effect
    """
    settings = get_settings()
    logger.info(
        "Webcheck server starting (ports=%s, probe_timeout=%gs, dns_timeout=%gs, "
        "max_workers=%d)",
        ",".join(CANDIDATE_PORTS),
        settings.probe_timeout,
        settings.dns_timeout,
        settings.max_workers,
    )
    try:
        yield {
            "ports": list(CANDIDATE_PORTS),
            "probe_timeout": settings.probe_timeout,
            "dns_timeout": settings.dns_timeout,
            "max_workers": settings.max_workers,
        }
    finally:
        logger.info("Webcheck server shutdown complete")


def configure_middleware(server: FastMCP) -> None:
    """Configure middleware stack for the server.

    Adds middleware in order: ErrorHandling -> Logging

    Args:
        server: The FastMCP server to configure.
    """
    settings = get_settings()
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(slow_threshold_ms=float(settings.slow_threshold_ms))
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with middleware, tools and resources.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("webcheck", lifespan=app_lifespan)

    configure_middleware(server)

    server.tool(name="check_hosts", output_schema=None)(webcheck)
    server.resource("webcheck://{host}")(host_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
