"""TCP reachability probing."""

import asyncio
import logging

logger = logging.getLogger(__name__)


async def probe_port(address: str, port: int | str, timeout: float = 3.0) -> bool:
    """Check if an address accepts TCP connections on a port.

    The connection is closed as soon as it is established; no data is
    exchanged. Timeouts, refusals and unreachable networks all count as
    unreachable.

    Args:
        address: IP address (or host name) to connect to.
        port: Port to connect to.
        timeout: Connection timeout in seconds.

    Returns:
        True if the connection succeeded, False otherwise.
    """
    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(address, int(port)),
            timeout=timeout,
        )
    except (TimeoutError, OSError) as e:
        logger.debug("Probe %s port %s failed: %s", address, port, type(e).__name__)
        return False

    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        # Peer reset during close; the connect already succeeded.
        pass
    logger.debug("Probe %s port %s succeeded", address, port)
    return True
