"""Docker Engine client.

A minimal client that checks connectivity with a Docker-Engine-compatible
daemon over its Unix socket and reads the daemon version.

Limitations:
    - Responses are parsed loosely, the status line is not validated
    - Chunked transfer encoding is not supported
    - Responses are read by polling, which adds up to
      max_attempts * backoff of latency per request

Example:
    >>> client = DockerEngineClient()
    >>> await client.connect()
    True
    >>> await client.get_version()
    '26.0.0'
"""

from typing import Optional
import os
import asyncio
import logging

from engineprobe.client.connector import SocketConnector
from engineprobe.client.errors import DockerEngineError, SocketNotFound, ConnectionFailed
from engineprobe.client.parser import parse_body
from engineprobe.client.poller import read_response, DEFAULT_MAX_ATTEMPTS, DEFAULT_BACKOFF
from engineprobe.client.request import build_request
from engineprobe.client.version import extract_version


class DockerEngineClient:
    """Client for a Docker Engine daemon reachable via Unix socket."""

    DEFAULT_SOCKET_PATH = "/var/run/docker.sock"

    def __init__(
        self,
        socket_path: str = DEFAULT_SOCKET_PATH,
        logger: Optional[logging.Logger] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        backoff: float = DEFAULT_BACKOFF,
        connector: Optional[SocketConnector] = None,
    ):
        """
        Initialize a Docker Engine client.

        Args:
            socket_path: Path to the daemon socket
            logger: Logger for client operations
            max_attempts: Empty polls allowed while reading a response
            backoff: Seconds to wait after each empty poll
            connector: Connector used to open connections
        """
        self._socket_path = socket_path
        self._logger = logger or logging.getLogger("engineprobe.engine")
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._connector = connector or SocketConnector(self._logger)

    @property
    def socket_path(self) -> str:
        """Path to the daemon socket."""
        return self._socket_path

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    async def connect(self) -> bool:
        """
        Connect to the daemon and verify that it answers.

        Returns:
            True once the daemon reported its version

        Raises:
            SocketNotFound: If the socket path does not exist
            DockerEngineError: If the version cannot be obtained
        """
        self._logger.debug("Attempting to connect to Docker Engine at %s", self._socket_path)

        if not os.path.exists(self._socket_path):
            self._logger.error("Docker socket not found at %s", self._socket_path)
            raise SocketNotFound(self._socket_path)

        version = await self.get_version()
        self._logger.info("Successfully connected to Docker Engine version: %s", version)
        return True

    async def get_version(self) -> str:
        """Get the daemon version string."""
        body = await self.make_request("/version")
        return extract_version(body)

    async def make_request(self, path: str, method: str = "GET") -> str:
        """
        Send one request to the daemon and return the response body.

        Args:
            path: API endpoint path
            method: HTTP method

        Returns:
            Response body as text

        Raises:
            DockerEngineError: On any failure; unexpected errors are
                reported as ConnectionFailed
        """
        try:
            async with self._connector.connection(self._socket_path) as sock:
                request = build_request(method, path)
                await asyncio.get_running_loop().sock_sendall(sock, request)
                self._logger.debug("Request sent, awaiting response")

                raw = await read_response(sock, self._max_attempts, self._backoff, self._logger)
                self._logger.debug("Read %d bytes from Docker Engine", len(raw))
                return parse_body(raw)

        except DockerEngineError as e:
            self._logger.error("Docker Engine request %s %s failed: %s", method, path, e)
            raise

        # pylint: disable=broad-except
        except Exception as e:
            self._logger.error("Failed to make request to Docker daemon: %s", e)
            raise ConnectionFailed(str(e)) from e
