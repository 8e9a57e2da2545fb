"""Docker Engine feature detection.

Helpers for tools that only need to know whether a daemon is usable.
"""

from typing import Dict, Any, Optional
import logging

from engineprobe.client import DockerEngineClient, DockerEngineError
from engineprobe.core.config import conf


_logger = logging.getLogger("engineprobe.console")


def _client(socket_path: Optional[str]) -> DockerEngineClient:
    return DockerEngineClient(
        socket_path=socket_path or conf.resolve_socket_path(),
        logger=_logger,
        **conf.client_kwargs(),
    )


async def engine_available(socket_path: Optional[str] = None) -> bool:
    """
    If Docker daemon is available.

    Args:
        socket_path: Daemon socket (default: resolved from configuration)

    Returns:
        bool: True if the daemon reported its version, False otherwise
    """
    client = _client(socket_path)
    try:
        return await client.connect()

    except DockerEngineError as e:
        _logger.error("Docker daemon not available: %s", e)
        return False


async def detect_engine(socket_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Probe the daemon and summarize the outcome.

    Args:
        socket_path: Daemon socket (default: resolved from configuration)

    Returns:
        Dict with:
            - available (bool): Whether the daemon answered
            - socket_path (str): Socket that was probed
            - version (str): Daemon version, None when unavailable
            - error (str): Failure description, None when available
    """
    client = _client(socket_path)
    result = {
        "available": False,
        "socket_path": client.socket_path,
        "version": None,
        "error": None,
    }

    try:
        result["version"] = await client.get_version()
        result["available"] = True

    except DockerEngineError as e:
        _logger.debug("Docker Engine probe failed: %s", e)
        result["error"] = str(e)

    return result
