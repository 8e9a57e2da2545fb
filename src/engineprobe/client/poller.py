"""Polling reader for daemon responses."""

from typing import Optional
import asyncio
import logging
import socket


DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_BACKOFF = 0.05
RECV_SIZE = 4096


async def read_response(
    sock: socket.socket,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    backoff: float = DEFAULT_BACKOFF,
    logger: Optional[logging.Logger] = None,
) -> bytes:
    """
    Accumulate whatever the daemon sends within the attempt budget.

    Reads are non-blocking. Available bytes are appended without charging an
    attempt; an empty poll sleeps for backoff and counts as one attempt. A
    read error ends the loop early and is treated as end of stream.

    Args:
        sock: Connected non-blocking socket
        max_attempts: Number of empty polls before giving up
        backoff: Seconds to sleep after an empty poll
        logger: Logger for read diagnostics

    Returns:
        Accumulated response bytes, possibly empty
    """
    logger = logger or logging.getLogger("engineprobe.engine")
    buffer = bytearray()
    attempts = 0

    while attempts < max_attempts:
        try:
            chunk = sock.recv(RECV_SIZE)
        except BlockingIOError:
            chunk = b""
        except OSError as e:
            logger.debug("Read stopped after %d bytes: %s", len(buffer), e)
            break

        if chunk:
            buffer.extend(chunk)
            continue

        await asyncio.sleep(backoff)
        attempts += 1

    return bytes(buffer)
