"""Global state management for webcheck."""

from webcheck.config import Settings
from webcheck.services.dispatcher import Dispatcher
from webcheck.services.resolver import HostResolver

# Global state (initialized on first access)
_settings: Settings | None = None
_dispatcher: Dispatcher | None = None


def get_settings() -> Settings:
    """Get or create settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_dispatcher() -> Dispatcher:
    """Get or create the dispatcher configured from settings."""
    global _dispatcher
    if _dispatcher is None:
        settings = get_settings()
        resolver = HostResolver(
            probe_timeout=settings.probe_timeout,
            dns_timeout=settings.dns_timeout,
        )
        _dispatcher = Dispatcher(
            resolver=resolver,
            max_workers=settings.max_workers,
            result_buffer=settings.result_buffer,
        )
    return _dispatcher


def reset_state() -> None:
    """Reset global state for testing.

    This function clears the singleton instances, allowing tests
    to start with fresh state. Should only be used in test fixtures.
    """
    global _settings, _dispatcher
    _settings = None
    _dispatcher = None


def set_settings(settings: Settings) -> None:
    """Set the global settings instance.

    The dispatcher is rebuilt from the new settings on next access.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings, _dispatcher
    _settings = settings
    _dispatcher = None


def set_dispatcher(dispatcher: Dispatcher) -> None:
    """Set the global dispatcher instance.

    Allows tests to inject a dispatcher with a stub resolver.

    Args:
        dispatcher: Dispatcher instance to use globally.
    """
    global _dispatcher
    _dispatcher = dispatcher
