"""Tests for process-wide settings and dispatcher accessors."""

import pytest

from webcheck.config import Settings
from webcheck.services import (
    Dispatcher,
    get_dispatcher,
    get_settings,
    reset_state,
    set_dispatcher,
    set_settings,
)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_dispatcher_built_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """The shared dispatcher reflects WEBCHECK_* settings."""
    monkeypatch.setenv("WEBCHECK_MAX_WORKERS", "3")
    monkeypatch.setenv("WEBCHECK_PROBE_TIMEOUT", "0.25")
    monkeypatch.setenv("WEBCHECK_DNS_TIMEOUT", "1.5")
    reset_state()

    dispatcher = get_dispatcher()

    assert dispatcher.max_workers == 3
    assert dispatcher.resolver.probe_timeout == 0.25
    assert dispatcher.resolver.dns_timeout == 1.5
    assert get_dispatcher() is dispatcher


def test_set_settings_rebuilds_dispatcher() -> None:
    old = get_dispatcher()

    set_settings(Settings(max_workers=5))

    new = get_dispatcher()
    assert new is not old
    assert new.max_workers == 5


def test_set_dispatcher_injects_instance() -> None:
    custom = Dispatcher(max_workers=1)

    set_dispatcher(custom)

    assert get_dispatcher() is custom
