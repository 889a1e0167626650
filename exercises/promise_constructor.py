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

"""Promise-returning exercises built with ``new_promise``.

The success value is what ``await`` returns; the error is what it raises.
"""

from __future__ import annotations

import os
from typing import Any

from exercises import primitives
from exercises.callback_review import first_line
from exercises.fetcher import Response
from exercises.promise import Reject, Resolve, new_promise


async def pluck_first_line_from_file_async(file_path: str | os.PathLike[str]) -> str:
    def executor(resolve: Resolve, reject: Reject) -> None:
        def on_read(err: BaseException | None, content: str | None) -> None:
            if err is not None:
                reject(err)
            else:
                resolve(first_line(content))

        primitives.read_file(file_path, on_read)

    return await new_promise(executor)


async def get_status_code_async(url: str) -> int:
    def executor(resolve: Resolve, reject: Reject) -> None:
        def on_response(err: BaseException | None, response: Response | None, _body: Any) -> None:
            if err is not None:
                return reject(err)

            resolve(response.status_code)

        primitives.http_get(url, on_response)

    return await new_promise(executor)
