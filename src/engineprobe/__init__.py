"""Reachability and version probe for a local Docker Engine daemon."""

from engineprobe.client import DockerEngineClient, DockerEngineError

__all__ = ["DockerEngineClient", "DockerEngineError"]
