"""Tests for TCP port probing."""

import asyncio
import socket
import time
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from webcheck.services.probe import probe_port


def _mock_writer() -> MagicMock:
    writer = MagicMock()
    writer.close = MagicMock()
    writer.wait_closed = AsyncMock()
    return writer


@pytest.mark.asyncio
async def test_probe_port_reachable() -> None:
    """Returns True and closes the connection when the port answers."""
    mock_writer = _mock_writer()

    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.return_value = (MagicMock(), mock_writer)

        result = await probe_port("192.0.2.10", "443")

    assert result is True
    mock_conn.assert_awaited_once_with("192.0.2.10", 443)
    mock_writer.close.assert_called_once()
    mock_writer.wait_closed.assert_awaited_once()


@pytest.mark.asyncio
async def test_probe_port_timeout() -> None:
    """Returns False on timeout."""
    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.side_effect = TimeoutError()

        result = await probe_port("192.0.2.10", 80)

    assert result is False


@pytest.mark.asyncio
async def test_probe_port_refused() -> None:
    """Returns False when the connection is refused."""
    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.side_effect = ConnectionRefusedError()

        result = await probe_port("192.0.2.10", 80)

    assert result is False


@pytest.mark.asyncio
async def test_probe_port_network_unreachable() -> None:
    """Returns False for other socket errors."""
    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.side_effect = OSError(101, "Network is unreachable")

        result = await probe_port("2001:db8::1", 443)

    assert result is False


@pytest.mark.asyncio
async def test_probe_port_ignores_reset_on_close() -> None:
    """A reset while closing still counts as reachable."""
    mock_writer = _mock_writer()
    mock_writer.wait_closed.side_effect = ConnectionResetError()

    with patch("asyncio.open_connection", new_callable=AsyncMock) as mock_conn:
        mock_conn.return_value = (MagicMock(), mock_writer)

        result = await probe_port("192.0.2.10", 80)

    assert result is True


@pytest.mark.asyncio
async def test_probe_port_enforces_timeout() -> None:
    """A connect that hangs is abandoned after the timeout."""

    async def hang(host: str, port: int) -> tuple:
        await asyncio.sleep(5)
        return (MagicMock(), _mock_writer())

    with patch("asyncio.open_connection", side_effect=hang):
        start = time.perf_counter()
        result = await probe_port("192.0.2.10", 80, timeout=0.05)
        elapsed = time.perf_counter() - start

    assert result is False
    assert elapsed < 1.0


@pytest.mark.asyncio
async def test_probe_port_real_listener() -> None:
    """Connects to a real listening socket on loopback."""
    server = await asyncio.start_server(
        lambda reader, writer: writer.close(), "127.0.0.1", 0
    )
    port = server.sockets[0].getsockname()[1]

    try:
        assert await probe_port("127.0.0.1", port, timeout=1.0) is True
    finally:
        server.close()
        await server.wait_closed()


@pytest.mark.asyncio
async def test_probe_port_real_closed_port() -> None:
    """A loopback port with no listener is unreachable."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()

    assert await probe_port("127.0.0.1", port, timeout=1.0) is False
