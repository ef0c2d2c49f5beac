"""Host check data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Ports that suggest an HTTP(S) server, in reporting order.
CANDIDATE_PORTS: tuple[str, ...] = ("80", "443")


class CheckState(Enum):
    """Lifecycle of a single host check."""

    UNSTARTED = "unstarted"
    RESOLVING = "resolving"
    RESOLUTION_FAILED = "resolution_failed"
    RESOLVED = "resolved"
    PROBING = "probing"
    DONE = "done"


@dataclass(frozen=True)
class HostCheckResult:
    """Outcome of checking one host.

    A result either carries resolved addresses and no error, or an error
    and no addresses. Open ports are always a subset of CANDIDATE_PORTS,
    listed in candidate order.
    """

    name: str
    addresses: tuple[str, ...] = ()
    open_ports: tuple[str, ...] = ()
    error: Exception | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate result invariants.

        Raises:
            ValueError: If the fields contradict each other.
        """
        if bool(self.addresses) == (self.error is not None):
            raise ValueError(
                f"{self.name}: exactly one of addresses or error must be set"
            )
        if self.open_ports and not self.addresses:
            raise ValueError(f"{self.name}: open ports without addresses")
        if len(set(self.open_ports)) != len(self.open_ports):
            raise ValueError(f"{self.name}: duplicate open ports {self.open_ports}")
        unknown = set(self.open_ports) - set(CANDIDATE_PORTS)
        if unknown:
            raise ValueError(f"{self.name}: unknown ports {sorted(unknown)}")

    @property
    def resolved(self) -> bool:
        """Whether DNS resolution succeeded."""
        return self.error is None

    @property
    def is_up(self) -> bool:
        """Whether at least one candidate port answered."""
        return bool(self.open_ports)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "name": self.name,
            "addresses": list(self.addresses),
            "open_ports": list(self.open_ports),
            "error": str(self.error) if self.error is not None else None,
        }
