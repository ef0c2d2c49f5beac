"""Tests for the console log formatter and logging setup."""

import logging
import sys
from unittest.mock import patch

from webcheck.utils.console import ColorfulFormatter, configure_logging


def _record(name: str, level: int, msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_plain_format_has_four_columns() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    record = _record("webcheck.services.dispatcher", logging.INFO, "Checking %d host(s)", 3)

    parts = [p.strip() for p in formatter.format(record).split("|")]

    assert len(parts) == 4
    assert parts[1] == "INFO"
    assert parts[2] == "services.dispatcher"
    assert parts[3] == "Checking 3 host(s)"


def test_plain_format_has_no_ansi_codes() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    record = _record("webcheck.services.resolver", logging.DEBUG, "x: done (open_ports=80)")

    assert "\033[" not in formatter.format(record)


def test_colored_format_highlights_open_ports() -> None:
    formatter = ColorfulFormatter(use_colors=True)
    record = _record("webcheck.services.resolver", logging.DEBUG, "x: done (open_ports=80,443)")

    output = formatter.format(record)

    assert "\033[96mopen_ports=80,443\033[0m" in output


def test_format_includes_exception_text() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    try:
        raise RuntimeError("kaput")
    except RuntimeError:
        record = logging.LogRecord(
            "webcheck.services.dispatcher", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    assert "RuntimeError: kaput" in formatter.format(record)


def test_configure_logging_installs_single_handler() -> None:
    webcheck_logger = logging.getLogger("webcheck")
    saved = (webcheck_logger.handlers[:], webcheck_logger.level, webcheck_logger.propagate)
    webcheck_logger.handlers = []

    try:
        with patch("webcheck.utils.console.sys") as mock_sys:
            mock_sys.stderr.isatty.return_value = False
            configure_logging("debug", use_colors=True)
            configure_logging("debug", use_colors=True)

        assert len(webcheck_logger.handlers) == 1
        assert webcheck_logger.level == logging.DEBUG
        assert webcheck_logger.propagate is False
        formatter = webcheck_logger.handlers[0].formatter
        assert isinstance(formatter, ColorfulFormatter)
        assert formatter.use_colors is False
        assert logging.getLogger("fastmcp").level == logging.WARNING
    finally:
        webcheck_logger.handlers, level, webcheck_logger.propagate = saved
        webcheck_logger.setLevel(level)
