"""Shared fixtures: an in-process fake Docker daemon on a Unix socket."""

from pathlib import Path
import socketserver
import tempfile
import threading
import pytest


VERSION_RESPONSE = (
    b"HTTP/1.1 200 OK\r\n"
    b"Api-Version: 1.45\r\n"
    b"Content-Type: application/json\r\n"
    b"Server: Docker/26.0.0 (linux)\r\n"
    b"\r\n"
    b'{"Version":"26.0.0","ApiVersion":"1.45","Os":"linux"}\n'
)


class _DaemonHandler(socketserver.BaseRequestHandler):
    """Reads one request, writes the canned response, then hangs up."""

    def handle(self):
        data = b""
        while b"\r\n\r\n" not in data:
            chunk = self.request.recv(4096)
            if not chunk:
                break
            data += chunk
        with self.server.lock:
            self.server.requests.append(data)
        self.request.sendall(self.server.response)


class FakeDaemon(socketserver.ThreadingMixIn, socketserver.UnixStreamServer):
    """Threaded Unix socket server answering every request the same way."""

    daemon_threads = True

    def __init__(self, path: str, response: bytes):
        super().__init__(path, _DaemonHandler)
        self.path = path
        self.response = response
        self.requests = []
        self.lock = threading.Lock()


@pytest.fixture
def socket_dir():
    """Short temporary directory, AF_UNIX paths are length limited."""
    with tempfile.TemporaryDirectory(prefix="ep-", dir="/tmp") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_daemon(socket_dir):
    """Factory starting a FakeDaemon with the given response bytes."""
    servers = []

    def start(response: bytes = VERSION_RESPONSE, name: str = "docker.sock"):
        server = FakeDaemon(str(socket_dir / name), response)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        return server

    yield start

    for server in servers:
        server.shutdown()
        server.server_close()
