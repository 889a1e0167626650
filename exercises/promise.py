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

"""Adapters between the two delivery conventions.

- ``new_promise``: build an awaitable from a ``(resolve, reject)`` executor.
- ``promisify``: error-first callback function → async function.
- ``callbackify``: async function → error-first callback function.
- ``settle``: awaitable → Result value.
"""

from __future__ import annotations

import asyncio
import functools
import threading
from collections.abc import Awaitable, Callable
from concurrent.futures import Future as ConcurrentFuture
from typing import Any, TypeVar

from exercises.errors import RejectionError
from exercises.logger import get_logger
from exercises.result import Fail, Ok, Result

log = get_logger(__name__)

T = TypeVar("T")

Resolve = Callable[..., None]
Reject = Callable[[Any], None]


def new_promise(executor: Callable[[Resolve, Reject], Any]) -> asyncio.Future[Any]:
    """Create a future settled by ``executor(resolve, reject)``.

    Must be called with a running event loop. ``resolve`` and ``reject`` are
    thread-safe and may be called from worker threads; the first call wins and
    the rest are ignored. If ``executor`` itself raises, the promise is
    rejected with that exception.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Any] = loop.create_future()
    settled = False
    lock = threading.Lock()

    def _settle(exc: BaseException | None, value: Any) -> None:
        if future.done():
            return
        if exc is not None:
            future.set_exception(exc)
        else:
            future.set_result(value)

    def _schedule(exc: BaseException | None, value: Any) -> None:
        nonlocal settled
        with lock:
            if settled:
                return
            settled = True
        try:
            loop.call_soon_threadsafe(_settle, exc, value)
        except RuntimeError:
            # Loop already closed: whoever awaited this has given up on it.
            log.debug("Promise settled after its event loop closed; outcome dropped")

    def resolve(value: Any = None) -> None:
        _schedule(None, value)

    def reject(reason: Any) -> None:
        if not isinstance(reason, BaseException):
            reason = RejectionError(reason)
        _schedule(reason, None)

    try:
        executor(resolve, reject)
    except Exception as exc:
        reject(exc)

    return future


def promisify(fn: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
    """Wrap an error-first callback function as an async function.

    The wrapped function receives the caller's arguments plus a trailing
    ``callback(err, value, *extra)``. A non-None ``err`` rejects; otherwise
    the first success value resolves and any extras are dropped.
    """

    @functools.wraps(fn)
    async def wrapper(*args: Any) -> Any:
        def executor(resolve: Resolve, reject: Reject) -> None:
            def callback(err: Any = None, value: Any = None, *_: Any) -> None:
                if err is not None:
                    reject(err)
                else:
                    resolve(value)

            fn(*args, callback)

        return await new_promise(executor)

    return wrapper


def _deliver(done: asyncio.Future[Any] | ConcurrentFuture[Any], callback: Callable[..., Any]) -> None:
    if done.cancelled():
        callback(asyncio.CancelledError(), None)
        return
    exc = done.exception()
    if exc is not None:
        callback(exc, None)
    else:
        callback(None, done.result())


def callbackify(async_fn: Callable[..., Awaitable[Any]]) -> Callable[..., None]:
    """Wrap an async function so its last positional argument is a callback.

    On a thread with a running loop the coroutine becomes a task on that loop
    and the callback runs there. Without one, it runs under its own loop on a
    dedicated daemon thread (never on the I/O pool, whose workers the
    coroutine itself needs) and the callback runs on that thread.
    """

    @functools.wraps(async_fn)
    def wrapper(*args: Any) -> None:
        if not args or not callable(args[-1]):
            raise TypeError(f"{async_fn.__name__}() expects a callback as its last argument")
        *call_args, callback = args

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            future: Any = _run_detached(_as_coroutine(async_fn, call_args), async_fn.__name__)
        else:
            future = loop.create_task(_as_coroutine(async_fn, call_args))

        future.add_done_callback(lambda done: _deliver(done, callback))

    return wrapper


async def _as_coroutine(async_fn: Callable[..., Awaitable[T]], args: list[Any]) -> T:
    return await async_fn(*args)


def _run_detached(coro: Awaitable[T], name: str) -> ConcurrentFuture[T]:
    """Run ``coro`` under ``asyncio.run`` on its own daemon thread."""
    future: ConcurrentFuture[T] = ConcurrentFuture()

    def target() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            value = asyncio.run(coro)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(value)

    threading.Thread(target=target, name=f"callbackify-{name}", daemon=True).start()
    return future


async def settle(awaitable: Awaitable[T]) -> Result[T]:
    """Await and fold the outcome into Ok/Fail. Cancellation propagates."""
    try:
        value = await awaitable
    except Exception as exc:
        log.debug("Awaitable rejected: %r", exc)
        return Fail.from_exception(exc)
    return Ok(data=value)
