"""Data models for webcheck."""

from webcheck.models.host import CANDIDATE_PORTS, CheckState, HostCheckResult

__all__ = [
    "CANDIDATE_PORTS",
    "CheckState",
    "HostCheckResult",
]
