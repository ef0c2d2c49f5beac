"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Engine
    probe_timeout: float = field(default=3.0)
    dns_timeout: float = field(default=5.0)
    max_workers: int = field(default=64)
    result_buffer: int = field(default=1024)

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    slow_threshold_ms: int = field(default=10_000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from WEBCHECK_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            probe_timeout=cls._get_float("WEBCHECK_PROBE_TIMEOUT", 3.0),
            dns_timeout=cls._get_float("WEBCHECK_DNS_TIMEOUT", 5.0),
            max_workers=cls._get_positive_int("WEBCHECK_MAX_WORKERS", 64),
            result_buffer=cls._get_positive_int("WEBCHECK_RESULT_BUFFER", 1024),
            transport=cls._get_transport(),
            http_host=os.getenv("WEBCHECK_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("WEBCHECK_HTTP_PORT", 8000),
            log_level=os.getenv("WEBCHECK_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("WEBCHECK_LOG_COLORS", True),
            slow_threshold_ms=cls._get_int("WEBCHECK_SLOW_THRESHOLD_MS", 10_000),
            include_traceback=cls._get_bool("WEBCHECK_INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @classmethod
    def _get_positive_int(cls, key: str, default: int) -> int:
        """Get an integer that must be > 0, falling back to default otherwise."""
        value = cls._get_int(key, default)
        if value <= 0:
            logger.warning(
                "%s must be > 0, got %d. Using default: %d", key, value, default
            )
            return default
        return value

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get a positive float (seconds) from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Float value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, using default %.1f", key, value, default)
            return default

        if parsed <= 0:
            logger.warning("%s must be > 0, got %s. Using default: %.1f", key, value, default)
            return default
        return parsed

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("stdio" or "http")
        """
        transport = os.getenv("WEBCHECK_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
