"""Package for the Docker Engine client."""

from engineprobe.client.engine import DockerEngineClient
from engineprobe.client.errors import (
    DockerEngineError,
    SocketNotFound,
    ConnectionFailed,
    InvalidResponse,
    RequestFailed,
)

__all__ = [
    "DockerEngineClient",
    "DockerEngineError",
    "SocketNotFound",
    "ConnectionFailed",
    "InvalidResponse",
    "RequestFailed",
]
