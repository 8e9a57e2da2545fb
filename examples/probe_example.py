#!/usr/bin/env python3
"""
Example usage of the Docker Engine client.

Checks that the daemon is reachable and prints its version.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from engineprobe.client import DockerEngineClient, DockerEngineError
from engineprobe.core import conf

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def main() -> int:
    """Main example function."""
    socket_path = sys.argv[1] if len(sys.argv) > 1 else conf.resolve_socket_path()
    client = DockerEngineClient(socket_path=socket_path, logger=logger)

    print(f"Probing Docker Engine at {client.socket_path}...")
    try:
        await client.connect()
        version = await client.get_version()
    except DockerEngineError as e:
        print(f"Docker Engine unavailable: {e}")
        return 1

    print(f"Docker Engine version: {version}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
