"""Package for engineprobe core."""

from engineprobe.core.config import ProbeConfig, conf
from engineprobe.core.probe import engine_available, detect_engine

__all__ = ["ProbeConfig", "conf", "engine_available", "detect_engine"]
