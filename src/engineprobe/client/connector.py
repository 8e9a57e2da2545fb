"""Unix domain socket connections to the Docker daemon."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import asyncio
import logging
import os
import socket

from engineprobe.client.errors import SocketNotFound, ConnectionFailed


class SocketConnector:
    """Opens and closes stream connections bound to a socket path."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("engineprobe.engine")

    async def open(self, path: str) -> socket.socket:
        """
        Open a non-blocking connection to the Unix socket at path.

        Args:
            path: Filesystem path of the daemon socket

        Returns:
            Connected socket in non-blocking mode

        Raises:
            SocketNotFound: If path does not exist
            ConnectionFailed: If the connect operation fails
        """
        if not os.path.exists(path):
            raise SocketNotFound(path)

        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.setblocking(False)
        try:
            await asyncio.get_running_loop().sock_connect(sock, path)
        except OSError as e:
            self.close(sock)
            raise ConnectionFailed(str(e)) from e

        self.logger.debug("Connected to %s", path)
        return sock

    def close(self, sock: socket.socket) -> None:
        """Close a connection, logging and suppressing any error."""
        try:
            sock.close()
        except OSError as e:
            self.logger.warning("Failed to close socket: %s", e)

    @asynccontextmanager
    async def connection(self, path: str) -> AsyncIterator[socket.socket]:
        """Connection scoped to the enclosing block, closed exactly once."""
        sock = await self.open(path)
        try:
            yield sock
        finally:
            self.close(sock)
