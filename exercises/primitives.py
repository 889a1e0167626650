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

"""Callback-style I/O primitives.

Each primitive starts its work on a shared thread pool and returns
immediately. When the work finishes, the error-first callback runs exactly
once on the worker thread:

    read_file("notes.txt", lambda err, text: ...)
    http_get("https://example.com", lambda err, response, body: ...)
    random_bytes(20, lambda err, buf: ...)
"""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import replace
from typing import Any

from exercises.fetcher import RequestOptions, Response, decode_body, fetch
from exercises.logger import get_logger

log = get_logger(__name__)

DEFAULT_MAX_WORKERS = 8

_lock = threading.Lock()
_pool: ThreadPoolExecutor | None = None
_max_workers = DEFAULT_MAX_WORKERS
_request_timeout: float | None = None


def _get_pool() -> ThreadPoolExecutor:
    global _pool
    with _lock:
        if _pool is None:
            _pool = ThreadPoolExecutor(
                max_workers=_max_workers,
                thread_name_prefix="exercises-io",
            )
        return _pool


def configure(max_workers: int, request_timeout: float | None = None) -> None:
    """Resize the pool. In-flight work on the old pool still completes.

    ``request_timeout`` becomes the socket timeout of every ``http_get`` whose
    options set none, so a request abandoned by an outer timeout still ends.
    """
    global _pool, _max_workers, _request_timeout
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")
    with _lock:
        old, _pool = _pool, None
        _max_workers = max_workers
        _request_timeout = request_timeout
    if old is not None:
        old.shutdown(wait=False)
    log.debug("Thread pool resized to %d workers (request timeout %s)", max_workers, request_timeout)


def shutdown(wait: bool = True) -> None:
    global _pool
    with _lock:
        old, _pool = _pool, None
    if old is not None:
        old.shutdown(wait=wait)


def submit(fn: Callable[..., Any], *args: Any) -> Future[Any]:
    """Run ``fn(*args)`` on the pool."""
    return _get_pool().submit(fn, *args)


def _on_done(
    future: Future[Any],
    callback: Callable[..., Any],
    success: Callable[[Any], tuple[Any, ...]],
    failure_width: int,
) -> None:
    exc = future.exception()
    if exc is not None:
        callback(exc, *([None] * failure_width))
        return
    callback(None, *success(future.result()))


# ── File system ───────────────────────────────────────────────


def _read_text(path: str | os.PathLike[str]) -> str:
    # newline="" keeps \r\n intact; bad bytes decode to U+FFFD
    with open(path, encoding="utf-8", errors="replace", newline="") as fh:
        text = fh.read()
    log.debug("Read %d chars from %s", len(text), path)
    return text


def read_file(path: str | os.PathLike[str], callback: Callable[..., Any]) -> None:
    """Read ``path`` as UTF-8 and deliver ``callback(err, text)``."""
    future = submit(_read_text, path)
    future.add_done_callback(lambda f: _on_done(f, callback, lambda text: (text,), 1))


# ── HTTP ──────────────────────────────────────────────────────


def _get(options: RequestOptions) -> tuple[Response, Any]:
    response = fetch(options)
    return response, decode_body(response, as_json=options.json)


def http_get(options: str | RequestOptions, callback: Callable[..., Any]) -> None:
    """GET a URL and deliver ``callback(err, response, body)``.

    ``body`` is text, or the parsed JSON document when ``options.json`` is set.
    """
    if isinstance(options, str):
        options = RequestOptions(url=options)
    if options.timeout is None and _request_timeout is not None:
        options = replace(options, timeout=_request_timeout)
    future = submit(_get, options)
    future.add_done_callback(lambda f: _on_done(f, callback, lambda pair: pair, 2))


# ── Randomness ────────────────────────────────────────────────


def random_bytes(size: int, callback: Callable[..., Any]) -> None:
    """Deliver ``callback(err, buf)`` with ``size`` bytes from the OS CSPRNG."""
    future = submit(os.urandom, size)
    future.add_done_callback(lambda f: _on_done(f, callback, lambda buf: (buf,), 1))
