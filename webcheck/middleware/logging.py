"""Logging middleware for tool and resource calls."""

import logging
import time
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from webcheck.middleware.base import WebcheckMiddleware


class LoggingMiddleware(WebcheckMiddleware):
    """Log tool calls and resource reads with their duration.

    Calls slower than slow_threshold_ms are logged at WARNING.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        slow_threshold_ms: float = 10_000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            slow_threshold_ms: Threshold in ms for slow call warnings.
        """
        super().__init__(logger=logger)
        self.slow_threshold_ms = slow_threshold_ms

    def _format_args(self, args: dict[str, Any] | None) -> str:
        """Format tool arguments, summarizing host lists by size."""
        if not args:
            return "()"
        parts = []
        for key, value in args.items():
            if isinstance(value, list):
                parts.append(f"{key}=[{len(value)} item(s)]")
            else:
                parts.append(f"{key}={value!r}")
        return f"({', '.join(parts)})"

    def _format_duration(self, duration_ms: float) -> str:
        if duration_ms >= self.slow_threshold_ms:
            return f"{duration_ms:.1f}ms SLOW!"
        return f"{duration_ms:.1f}ms"

    async def _timed(self, kind: str, label: str, context: MiddlewareContext, call_next: Any) -> Any:
        start = time.perf_counter()
        self.logger.info(">>> %s: %s", kind, label)
        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.error(
                "!!! %s: %s -> %s: %s [%s]",
                kind,
                label,
                type(e).__name__,
                e,
                self._format_duration(duration_ms),
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        level = logging.WARNING if duration_ms >= self.slow_threshold_ms else logging.INFO
        self.logger.log(
            level, "<<< %s: %s [%s]", kind, label, self._format_duration(duration_ms)
        )
        return result

    async def on_call_tool(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Log tool calls with name, arguments, and timing."""
        name = getattr(context.message, "name", "unknown")
        args = getattr(context.message, "arguments", None)
        return await self._timed("TOOL", f"{name}{self._format_args(args)}", context, call_next)

    async def on_read_resource(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Log resource reads with URI and timing."""
        uri = getattr(context.message, "uri", "unknown")
        return await self._timed("RESOURCE", str(uri), context, call_next)
