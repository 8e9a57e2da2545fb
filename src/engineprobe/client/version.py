"""Version field extraction."""

import json

from engineprobe.client.errors import InvalidResponse


def extract_version(body: str) -> str:
    """Return the "Version" string from a /version response body."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise InvalidResponse() from e

    if not isinstance(data, dict):
        raise InvalidResponse()

    version = data.get("Version")
    if not isinstance(version, str):
        raise InvalidResponse()

    return version
