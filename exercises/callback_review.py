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

"""Error-first callback exercises.

Both functions follow the two rules of the convention:
  1. the callback is the last argument;
  2. it is invoked once as ``callback(err, result)``.

    def on_line(err, line):
        if err is not None:
            log.error("read failed: %s", err)
        else:
            log.info("first line: %s", line)

    pluck_first_line_from_file("README.md", on_line)
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

from exercises import primitives
from exercises.fetcher import Response

Callback = Callable[[BaseException | None, Any], Any]


def first_line(content: str) -> str:
    return content.split("\n")[0]


def pluck_first_line_from_file(file_path: str | os.PathLike[str], callback: Callback) -> None:
    """Deliver the text before the first newline of ``file_path``."""

    def on_read(err: BaseException | None, content: str | None) -> None:
        if err is not None:
            callback(err, None)
        else:
            callback(None, first_line(content))

    primitives.read_file(file_path, on_read)


def get_status_code(url: str, callback: Callback) -> None:
    """Deliver the HTTP status code of a GET to ``url``."""

    def on_response(err: BaseException | None, response: Response | None, _body: Any) -> None:
        if err is not None:
            return callback(err, None)

        callback(None, response.status_code)

    primitives.http_get(url, on_response)
