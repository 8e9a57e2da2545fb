"""engineprobe configuration."""

from typing import Dict, Any, Optional
from pathlib import Path
import json
import os


UNIX_SCHEME = "unix://"


class ProbeConfig:
    """Manages engineprobe configuration."""

    def __init__(self, config_path: str = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config JSON file
        """
        self.path: Optional[str] = None
        self.config = self.get_default_config()

        if config_path and Path(config_path).exists():
            with open(config_path, encoding="utf-8") as f:
                _merge(self.config, json.load(f))
            self.path = Path(config_path).resolve().as_posix()

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration."""
        return {
            "engine": {
                "socket_path": "/var/run/docker.sock",
                "poll": {
                    "max_attempts": 10,
                    "backoff_ms": 50,
                },
            },
            "output": {
                "level": "info",
            },
        }

    def get(self, key_path: str, default=None):
        """
        Get configuration value using dot notation.

        Example: config.get('engine.poll.max_attempts')
        """
        keys = key_path.split(".")
        value = self.config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def resolve_socket_path(self) -> str:
        """
        Pick the daemon socket to probe.

        DOCKER_HOST wins when it names a unix:// socket. Otherwise the
        configured path is used if it exists, then the first existing
        well-known location, then the configured path as-is.
        """
        docker_host = os.environ.get("DOCKER_HOST", "")
        if docker_host.startswith(UNIX_SCHEME):
            return docker_host[len(UNIX_SCHEME) :]

        configured = self.get("engine.socket_path", "/var/run/docker.sock")
        if Path(configured).exists():
            return configured

        for candidate in candidate_socket_paths():
            if candidate.exists():
                return candidate.as_posix()

        return configured

    def client_kwargs(self) -> Dict[str, Any]:
        """Poll settings as DockerEngineClient keyword arguments."""
        return {
            "max_attempts": int(self.get("engine.poll.max_attempts", 10)),
            "backoff": float(self.get("engine.poll.backoff_ms", 50)) / 1000.0,
        }


def candidate_socket_paths():
    """Well-known per-user daemon socket locations."""
    home = Path.home()
    candidates = [
        home / ".docker" / "run" / "docker.sock",
        home / ".colima" / "docker.sock",
    ]
    runtime_dir = os.environ.get("XDG_RUNTIME_DIR")
    if runtime_dir:
        candidates.append(Path(runtime_dir) / "docker.sock")
    return candidates


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


def initialize() -> ProbeConfig:
    """Initialize and return the engineprobe configuration."""

    project_dir = Path.cwd()
    selected_config = None
    for fname in ("engineprobe.json", "engineprobe.config.json"):
        candidate = project_dir / fname
        if candidate.exists():
            selected_config = str(candidate)
            break

    return ProbeConfig(config_path=selected_config)


conf = initialize()
