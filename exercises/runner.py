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

"""Exercise runner — drives one operation through its delivery conventions.

Each registered operation has an error-first callback form and an async
form. The runner invokes either or both, folds each outcome into a Result,
and checks that the two conventions agree.

A timeout, when configured, is layered on from outside with
``asyncio.wait_for``; the operations themselves never time out.
"""

from __future__ import annotations

import asyncio
import re
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from exercises.callback_review import get_status_code, pluck_first_line_from_file
from exercises.logger import RunSummary, get_logger
from exercises.promise import new_promise, settle
from exercises.promise_constructor import get_status_code_async, pluck_first_line_from_file_async
from exercises.promisification import (
    generate_random_token,
    generate_random_token_async,
    get_github_profile,
    get_github_profile_async,
    read_file_and_make_it_funny,
    read_file_and_make_it_funny_async,
)
from exercises.result import Fail, Ok, Result, from_callback_args

log = get_logger(__name__)

_TOKEN_RE = re.compile(r"^[0-9a-f]{40}$")


@dataclass(frozen=True, slots=True)
class Operation:
    """One exercise exposed in both delivery conventions."""

    name: str
    arity: int
    callback_fn: Callable[..., None]
    async_fn: Callable[..., Awaitable[Any]]
    single_slot: bool = False
    description: str = ""


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation(
            name="first-line",
            arity=1,
            callback_fn=pluck_first_line_from_file,
            async_fn=pluck_first_line_from_file_async,
            description="First line of a UTF-8 file",
        ),
        Operation(
            name="status",
            arity=1,
            callback_fn=get_status_code,
            async_fn=get_status_code_async,
            description="HTTP status code of a GET",
        ),
        Operation(
            name="profile",
            arity=1,
            callback_fn=get_github_profile,
            async_fn=get_github_profile_async,
            description="GitHub user profile",
        ),
        Operation(
            name="token",
            arity=0,
            callback_fn=generate_random_token,
            async_fn=generate_random_token_async,
            description="40-char hex random token",
        ),
        Operation(
            name="funny",
            arity=1,
            callback_fn=read_file_and_make_it_funny,
            async_fn=read_file_and_make_it_funny_async,
            single_slot=True,
            description="File with ' lol' appended to every line",
        ),
    )
}


@dataclass
class RunReport:
    """Outcomes of one run, keyed by delivery style."""

    operation: str
    results: dict[str, Result[Any]] = field(default_factory=dict)
    summary: RunSummary = field(default_factory=RunSummary)

    @property
    def ok(self) -> bool:
        return bool(self.results) and all(r.ok for r in self.results.values()) and self.equivalent

    @property
    def equivalent(self) -> bool:
        """True unless both styles ran and disagree."""
        if len(self.results) < 2:
            return True
        first, second = self.results["callback"], self.results["promise"]
        return outcomes_match(self.operation, first, second)


def outcomes_match(operation: str, a: Result[Any], b: Result[Any]) -> bool:
    if a.ok != b.ok:
        return False
    if not a.ok:
        return type(a.exception) is type(b.exception)
    if operation == "token":
        return all(isinstance(r.data, str) and _TOKEN_RE.match(r.data) for r in (a, b))
    return a.data == b.data


def _callback_outcome(op: Operation, err_or_value: tuple[Any, ...]) -> Result[Any]:
    if op.single_slot:
        (value,) = err_or_value
        if isinstance(value, BaseException):
            return Fail.from_exception(value)
        return Ok(data=value)
    err, value = err_or_value[:2]
    return from_callback_args(err, value)


async def run_callback(op: Operation, args: list[str]) -> Result[Any]:
    """Invoke the callback form and wait for its single notification."""

    def executor(resolve: Callable[..., None], _reject: Callable[[Any], None]) -> None:
        op.callback_fn(*args, lambda *delivered: resolve(_callback_outcome(op, delivered)))

    return await new_promise(executor)


async def run_promise(op: Operation, args: list[str]) -> Result[Any]:
    return await settle(op.async_fn(*args))


_RUNNERS: dict[str, Callable[[Operation, list[str]], Awaitable[Result[Any]]]] = {
    "callback": run_callback,
    "promise": run_promise,
}


async def _run_style(
    op: Operation,
    args: list[str],
    style: str,
    timeout: float | None,
) -> Result[Any]:
    try:
        return await asyncio.wait_for(_RUNNERS[style](op, args), timeout=timeout)
    except asyncio.TimeoutError as exc:
        return Fail(error=f"Timeout after {timeout}s", context=exc)


async def run_operation(
    name: str,
    args: list[str],
    style: str = "promise",
    timeout: float | None = None,
) -> RunReport:
    """Run ``name`` in the given style ("promise", "callback" or "both").

    Raises:
        KeyError: unknown operation or style.
        TypeError: wrong number of arguments for the operation.
    """
    op = OPERATIONS[name]
    if len(args) != op.arity:
        raise TypeError(f"'{name}' takes {op.arity} argument(s), got {len(args)}")

    styles = ["callback", "promise"] if style == "both" else [style]
    for s in styles:
        if s not in _RUNNERS:
            raise KeyError(s)

    report = RunReport(operation=name, summary=RunSummary(operation=name))
    for s in styles:
        log.info("── %s (%s) ──", name, s)
        started = time.perf_counter()
        result = await _run_style(op, args, s, timeout)
        counter = report.summary.counter(s)
        counter.elapsed += time.perf_counter() - started
        if result.ok:
            counter.ok += 1
        else:
            counter.failed += 1
            log.warning("%s (%s) failed: %s", name, s, result.error)
        report.results[s] = result

    if len(styles) > 1:
        report.summary.agreed = report.equivalent
    if not report.equivalent:
        log.error("Delivery conventions disagree for '%s'", name)

    log.info(report.summary.report())
    return report
