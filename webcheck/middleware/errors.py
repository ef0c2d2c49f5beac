"""Error handling middleware for consistent error logging."""

import logging
import traceback
from collections import defaultdict
from typing import Any

from fastmcp.exceptions import ResourceError, ToolError
from fastmcp.server.middleware import MiddlewareContext

from webcheck.middleware.base import WebcheckMiddleware


class ErrorHandlingMiddleware(WebcheckMiddleware):
    """Log and count exceptions escaping MCP handlers, then re-raise them.

    Rejected requests (ToolError, ResourceError) are logged at WARNING
    without traceback; anything else is an unexpected failure and is
    logged at ERROR.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback for failures.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Get error statistics by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        """Reset error statistics."""
        self._error_counts.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Handle errors during request processing.

        Raises:
            Exception: Re-raises the original exception after logging.
        """
        try:
            return await call_next(context)

        except (ToolError, ResourceError) as e:
            self._error_counts[type(e).__name__] += 1
            self.logger.warning("Rejected %s: %s", context.method, e)
            raise

        except Exception as e:
            error_type = type(e).__name__
            self._error_counts[error_type] += 1

            if self.include_traceback:
                self.logger.error(
                    "Error in %s: %s: %s\n%s",
                    context.method,
                    error_type,
                    e,
                    traceback.format_exc(),
                )
            else:
                self.logger.error("Error in %s: %s: %s", context.method, error_type, e)
            raise
