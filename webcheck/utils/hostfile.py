"""Host list file reading."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HostListError(ValueError):
    """Host list is missing or contains no host names."""


def parse_hosts(text: str) -> list[str]:
    """Extract host names from newline-delimited text.

    Surrounding whitespace is trimmed; blank lines and lines beginning
    with "#" are skipped. Order is preserved.
    """
    hosts = []
    for line in text.splitlines():
        name = line.strip()
        if name and not name.startswith("#"):
            hosts.append(name)
    return hosts


def read_hosts_file(path: str | Path) -> list[str]:
    """Read a file containing one host name per line.

    Args:
        path: File to read

    Returns:
        Host names in file order (may be empty)

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    hosts = parse_hosts(path.read_text(encoding="utf-8", errors="replace"))
    logger.debug("Read %d host(s) from %s", len(hosts), path)
    return hosts


def require_hosts(hosts: list[str]) -> list[str]:
    """Return hosts unchanged, or raise if there are none.

    Raises:
        HostListError: If hosts is empty
    """
    if not hosts:
        raise HostListError("empty hosts list")
    return hosts
