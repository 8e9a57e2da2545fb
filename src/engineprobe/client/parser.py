"""Extract the body from a raw daemon response."""

from engineprobe.client.errors import InvalidResponse


HEADER_DELIMITER = "\r\n\r\n"


def parse_body(buffer: bytes) -> str:
    """
    Split a raw HTTP response and return its body.

    The status line and headers are discarded unvalidated. When no header
    delimiter is present, the span from the first "{" to the last "}" is
    recovered instead.

    Args:
        buffer: Bytes accumulated from the connection

    Returns:
        Body text

    Raises:
        InvalidResponse: If the bytes are not UTF-8 or no body can be found
    """
    try:
        text = buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidResponse() from e

    parts = text.split(HEADER_DELIMITER, 1)
    if len(parts) >= 2:
        return parts[1].strip()

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end >= start:
        return text[start : end + 1]

    raise InvalidResponse()
