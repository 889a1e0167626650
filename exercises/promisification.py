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

"""Async versions of callback functions, by ``promisify`` or by hand.

``promisify`` only works for functions that follow the error-first
convention. ``read_file_and_make_it_funny`` does not (its callback receives
either the error or the text in a single slot), so its async versions are
written with ``new_promise`` instead.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

from exercises import primitives
from exercises.errors import GitHubProfileError
from exercises.fetcher import RequestOptions, Response
from exercises.promise import Reject, Resolve, new_promise, promisify

GITHUB_USERS_URL = "https://api.github.com/users/"
USER_AGENT = "request"
TOKEN_BYTES = 20
FUNNY_SUFFIX = " lol"

Callback = Callable[[BaseException | None, Any], Any]
ErrorOrText = BaseException | str


# ── (1) HTTP request ──────────────────────────────────────────


def _profile_options(user: str) -> RequestOptions:
    return RequestOptions(
        url=GITHUB_USERS_URL + user,
        headers={"User-Agent": USER_AGENT},
        json=True,
    )


def _profile_outcome(body: Any) -> tuple[GitHubProfileError | None, Any]:
    # Any truthy message is a failure, whatever the HTTP status.
    if isinstance(body, dict) and body.get("message"):
        return GitHubProfileError(str(body["message"])), None
    return None, body


def get_github_profile(user: str, callback: Callback) -> None:
    """Deliver the parsed ``/users/<user>`` document from the GitHub API."""

    def on_response(err: BaseException | None, _response: Response | None, body: Any) -> None:
        if err is not None:
            callback(err, None)
        else:
            callback(*_profile_outcome(body))

    primitives.http_get(_profile_options(user), on_response)


get_github_profile_async = promisify(get_github_profile)


async def get_github_profile_manual_async(user: str) -> Any:
    """Same as ``get_github_profile_async`` without ``promisify``."""

    def executor(resolve: Resolve, reject: Reject) -> None:
        def on_response(err: BaseException | None, _response: Response | None, body: Any) -> None:
            if err is not None:
                return reject(err)
            domain_err, profile = _profile_outcome(body)
            if domain_err is not None:
                return reject(domain_err)
            resolve(profile)

        primitives.http_get(_profile_options(user), on_response)

    return await new_promise(executor)


# ── (2) Token generation ──────────────────────────────────────


def generate_random_token(callback: Callback) -> None:
    """Deliver 20 random bytes as 40 lowercase hex characters."""

    def on_bytes(err: BaseException | None, buf: bytes | None) -> None:
        if err is not None:
            return callback(err, None)
        callback(None, buf.hex())

    primitives.random_bytes(TOKEN_BYTES, on_bytes)


generate_random_token_async = promisify(generate_random_token)


async def generate_random_token_manual_async() -> str:
    def executor(resolve: Resolve, reject: Reject) -> None:
        def on_bytes(err: BaseException | None, buf: bytes | None) -> None:
            if err is not None:
                return reject(err)
            resolve(buf.hex())

        primitives.random_bytes(TOKEN_BYTES, on_bytes)

    return await new_promise(executor)


# ── (3) File manipulation ─────────────────────────────────────


def make_it_funny(content: str) -> str:
    return "\n".join(line + FUNNY_SUFFIX for line in content.split("\n"))


def read_file_and_make_it_funny(
    file_path: str | os.PathLike[str],
    callback: Callable[[ErrorOrText], Any],
) -> None:
    """Deliver the funny text, or the read error, as the only argument.

    Not error-first: callers must check ``isinstance(value, BaseException)``.
    """

    def on_read(err: BaseException | None, content: str | None) -> None:
        if err is not None:
            return callback(err)
        callback(make_it_funny(content))

    primitives.read_file(file_path, on_read)


async def read_file_and_make_it_funny_async(file_path: str | os.PathLike[str]) -> str:
    def executor(resolve: Resolve, reject: Reject) -> None:
        def on_read(err: BaseException | None, content: str | None) -> None:
            if err is not None:
                return reject(err)
            resolve(make_it_funny(content))

        primitives.read_file(file_path, on_read)

    return await new_promise(executor)


async def read_file_and_make_it_funny_bridged_async(file_path: str | os.PathLike[str]) -> str:
    """Re-expose the single-slot callback form by inspecting the value's type."""

    def executor(resolve: Resolve, reject: Reject) -> None:
        def on_value(error_or_file: ErrorOrText) -> None:
            if isinstance(error_or_file, BaseException):
                reject(error_or_file)
            else:
                resolve(error_or_file)

        read_file_and_make_it_funny(file_path, on_value)

    return await new_promise(executor)
