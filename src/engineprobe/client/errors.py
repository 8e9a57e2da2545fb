"""Errors raised by the Docker Engine client."""


class DockerEngineError(Exception):
    """Base exception for Docker Engine client errors."""

    pass


class SocketNotFound(DockerEngineError):
    """Raised when the daemon socket path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Docker socket not found at path: {path}")


class ConnectionFailed(DockerEngineError):
    """Raised when connecting to or talking with the daemon fails."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to connect to Docker Engine: {detail}")


class InvalidResponse(DockerEngineError):
    """Raised when the daemon response cannot be interpreted."""

    def __init__(self):
        super().__init__("Received invalid response from Docker Engine")


class RequestFailed(DockerEngineError):
    """Reserved for request-level failures reported by the daemon."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Docker Engine request failed: {detail}")
