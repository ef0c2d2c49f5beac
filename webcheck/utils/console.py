"""Colorful console logging formatter and logging setup."""

import logging
import re
import sys
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "webcheck.server": COLORS["bright_cyan"],
    "webcheck.services.dispatcher": COLORS["bright_magenta"],
    "webcheck.services.resolver": COLORS["bright_blue"],
    "webcheck.services.probe": COLORS["cyan"],
    "webcheck.middleware": COLORS["yellow"],
    "webcheck.config": COLORS["green"],
    "default": COLORS["white"],
}

NOISY_LOGGERS = (
    "fastmcp",
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "starlette",
    "httpx",
    "httpcore",
    "anyio",
)

_DURATION_PATTERN = re.compile(r"(\d+\.?\d*m?s)\b")
_PORTS_PATTERN = re.compile(r"(open_ports=[\w,\-]+)")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with local timestamps and component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created).astimezone()
        return f"{dt:%H:%M:%S}.{int(record.msecs):03d} {dt:%m/%d}"

    def _format_level(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("webcheck."):
            name = name[len("webcheck.") :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def _highlight_message(self, message: str) -> str:
        """Highlight durations and open port lists."""
        if not self.use_colors:
            return message

        message = _DURATION_PATTERN.sub(
            f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
        )
        return _PORTS_PATTERN.sub(
            f"{COLORS['bright_cyan']}\\1{COLORS['reset']}", message
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as "time | level | component | message"."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str = "INFO", use_colors: bool = True) -> None:
    """Configure the webcheck logger to write to stderr.

    Safe to call more than once; the handler is only installed the first time.

    Args:
        level: Log level name for the webcheck logger.
        use_colors: Whether to use ANSI colors (ignored when stderr is not a TTY).
    """
    if not sys.stderr.isatty():
        use_colors = False

    webcheck_logger = logging.getLogger("webcheck")
    webcheck_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not webcheck_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        webcheck_logger.addHandler(handler)
        webcheck_logger.propagate = False

    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)
