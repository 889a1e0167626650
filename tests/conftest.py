# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Shared fixtures: a local HTTP server and a helper for callback-style calls."""

from __future__ import annotations

import json
import socket
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

import pytest

# Keep localhost traffic away from any proxy configured in the environment.
_NO_PROXY = "*"

USERS: dict[str, tuple[int, dict[str, Any]]] = {
    "octocat": (200, {"login": "octocat", "id": 583231, "type": "User"}),
    "limited": (200, {"message": "API rate limit exceeded"}),
    "blank": (200, {"login": "blank", "message": ""}),
}


@dataclass
class LocalServer:
    url: str
    seen_headers: list[dict[str, str]] = field(default_factory=list)
    seen_paths: list[str] = field(default_factory=list)


class _Handler(BaseHTTPRequestHandler):
    server: Any

    def do_GET(self) -> None:  # noqa: N802
        self.server.seen_headers.append({k.lower(): v for k, v in self.headers.items()})
        self.server.seen_paths.append(self.path)
        if self.path == "/ok":
            self._send(200, b"hello", "text/plain")
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/ok")
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/missing":
            self._send(404, b"nope", "text/plain")
        elif self.path == "/text":
            self._send(200, b"not json", "text/plain")
        elif self.path.startswith("/users/"):
            user = self.path.removeprefix("/users/")
            status, doc = USERS.get(user, (404, {"message": "Not Found"}))
            self._send(status, json.dumps(doc).encode("utf-8"), "application/json")
        else:
            self._send(500, b"unexpected path", "text/plain")

    def _send(self, status: int, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("no_proxy", _NO_PROXY)
    monkeypatch.setenv("NO_PROXY", _NO_PROXY)


@pytest.fixture
def http_server() -> Iterator[LocalServer]:
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    server.seen_headers = []
    server.seen_paths = []
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    local = LocalServer(
        url=f"http://{host}:{port}",
        seen_headers=server.seen_headers,
        seen_paths=server.seen_paths,
    )
    try:
        yield local
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def dead_url() -> str:
    """A URL on a port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/"


@pytest.fixture
def wait_for() -> Callable[..., tuple[Any, ...]]:
    """Call ``fn(*args, callback)`` and block until the callback fires.

    Returns the arguments the callback received and checks it fired once.
    """

    def _call(fn: Callable[..., Any], *args: Any, timeout: float = 5.0) -> tuple[Any, ...]:
        delivered: list[tuple[Any, ...]] = []
        done = threading.Event()

        def callback(*values: Any) -> None:
            delivered.append(values)
            done.set()

        fn(*args, callback)
        assert done.wait(timeout), f"{fn.__name__} never called back"
        assert len(delivered) == 1
        return delivered[0]

    return _call


@pytest.fixture
def write_file(tmp_path):
    def _write(content: str, name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return str(path)

    return _write


@pytest.fixture
def silent_url() -> Iterator[str]:
    """A URL whose server accepts connections but never answers."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen(8)
        port = sock.getsockname()[1]
        yield f"http://127.0.0.1:{port}/"
