"""Raw HTTP/1.1 request framing."""

SUPPORTED_METHODS = ("GET",)


def build_request(method: str, path: str, host: str = "localhost") -> bytes:
    """Format a single body-less HTTP/1.1 request.

    The daemon is asked to close the stream after responding.

    Args:
        method: HTTP method, only GET is supported
        path: API endpoint path (e.g. "/version")
        host: Value of the Host header

    Returns:
        Encoded request bytes ending with the blank-line terminator
    """
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        raise ValueError(f"Unsupported method: {method}")

    lines = [
        f"{method} {path} HTTP/1.1",
        f"Host: {host}",
        "Accept: application/json",
        "Connection: close",
        "",
        "",
    ]
    return "\r\n".join(lines).encode("utf-8")
