"""Per-host DNS resolution and port probing.

A check runs strictly sequentially: one DNS lookup, then one probe per
(address, candidate port) pair. Failures stay inside the returned
HostCheckResult; nothing is raised to the caller.
"""

import asyncio
import logging
import socket
from collections.abc import Awaitable, Callable, Sequence
from concurrent.futures import Executor
from typing import Any

from webcheck.models import CANDIDATE_PORTS, CheckState, HostCheckResult
from webcheck.services.probe import probe_port

logger = logging.getLogger(__name__)

Prober = Callable[[str, str, float], Awaitable[bool]]


def _mark_started(started: "asyncio.Future[None]") -> None:
    if not started.done():
        started.set_result(None)


class ResolutionError(Exception):
    """DNS lookup did not produce any address for a host."""

    def __init__(self, host: str, reason: str) -> None:
        self.host = host
        self.reason = reason
        super().__init__(reason)


class HostResolver:
    """Resolve one host and find which candidate ports answer."""

    def __init__(
        self,
        probe_timeout: float = 3.0,
        dns_timeout: float = 5.0,
        ports: Sequence[str] = CANDIDATE_PORTS,
        prober: Prober = probe_port,
    ) -> None:
        """Initialize resolver.

        Args:
            probe_timeout: Seconds allowed for each TCP connect attempt
            dns_timeout: Seconds allowed for the DNS lookup
            ports: Candidate ports, in reporting order
            prober: Coroutine function used to test one address/port pair
        """
        self.probe_timeout = probe_timeout
        self.dns_timeout = dns_timeout
        self.ports = tuple(ports)
        self._prober = prober

    async def lookup(self, host: str, executor: Executor | None = None) -> list[str]:
        """Resolve a host name to its addresses using the system resolver.

        The DNS timeout starts once a thread has picked up the lookup, so
        time spent queued behind other lookups is not counted.

        Args:
            host: Host name to resolve
            executor: Thread pool to run the blocking lookup on
                (the loop's default executor if None)

        Returns:
            Unique addresses, in the order the resolver returned them

        Raises:
            ResolutionError: If the lookup failed, timed out, or returned nothing
        """
        loop = asyncio.get_running_loop()
        started: asyncio.Future[None] = loop.create_future()

        def resolve() -> list[tuple[Any, ...]]:
            loop.call_soon_threadsafe(_mark_started, started)
            return socket.getaddrinfo(host, None, type=socket.SOCK_STREAM)

        future = loop.run_in_executor(executor, resolve)
        try:
            await asyncio.wait({started, future}, return_when=asyncio.FIRST_COMPLETED)
            infos = await asyncio.wait_for(future, timeout=self.dns_timeout)
        except TimeoutError as e:
            raise ResolutionError(
                host, f"lookup {host}: timed out after {self.dns_timeout:g}s"
            ) from e
        except socket.gaierror as e:
            raise ResolutionError(host, f"lookup {host}: {e.strerror or e}") from e
        except (OSError, UnicodeError) as e:
            raise ResolutionError(host, f"lookup {host}: {e}") from e
        finally:
            future.cancel()
            started.cancel()

        addresses = list(dict.fromkeys(str(info[4][0]) for info in infos))
        if not addresses:
            raise ResolutionError(host, f"lookup {host}: no addresses found")
        return addresses

    async def check(
        self, host: str, executor: Executor | None = None
    ) -> HostCheckResult:
        """Run the full check for one host.

        Args:
            host: Host name to check
            executor: Thread pool for the DNS lookup (loop default if None)

        Returns:
            Result with addresses and open ports, or with the resolution error
        """
        logger.debug("%s: %s", host, CheckState.RESOLVING.value)

        try:
            addresses = await self.lookup(host, executor)
        except ResolutionError as e:
            logger.warning("Could not resolve %s: %s", host, e)
            logger.debug("%s: %s", host, CheckState.RESOLUTION_FAILED.value)
            return HostCheckResult(name=host, error=e)

        logger.debug(
            "%s: %s (%s)", host, CheckState.RESOLVED.value, ", ".join(addresses)
        )

        logger.debug("%s: %s", host, CheckState.PROBING.value)
        reachable = {port: False for port in self.ports}
        for address in addresses:
            for port in self.ports:
                if await self._prober(address, port, self.probe_timeout):
                    reachable[port] = True

        open_ports = tuple(port for port in self.ports if reachable[port])
        logger.debug(
            "%s: %s (open_ports=%s)",
            host,
            CheckState.DONE.value,
            ",".join(open_ports) or "-",
        )
        return HostCheckResult(
            name=host,
            addresses=tuple(addresses),
            open_ports=open_ports,
        )
