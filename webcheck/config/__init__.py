"""Configuration module for webcheck.

- Settings: Environment variable configuration
"""

from webcheck.config.settings import Settings

__all__ = ["Settings"]
