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

"""HTTP transport for the exercises, using urllib.

Issues a single GET and hands back the status, headers and raw body.
HTTP error statuses are ordinary responses; only transport failures
(DNS, connection, TLS, timeout) raise. No retries.
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any

import certifi

from exercises.logger import get_logger

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """What to GET and how to read the body back."""

    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json: bool = False
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class Response:
    status_code: int
    headers: dict[str, str]
    body: bytes


def fetch(options: RequestOptions) -> Response:
    """Single GET; raises the transport error untouched."""
    headers = dict(options.headers)
    if options.json:
        headers.setdefault("Accept", "application/json")

    req = urllib.request.Request(options.url, headers=headers, method="GET")
    log.debug("GET %s", options.url)

    kwargs: dict[str, Any] = {"context": _ssl_ctx}
    if options.timeout is not None:
        kwargs["timeout"] = options.timeout

    try:
        with urllib.request.urlopen(req, **kwargs) as resp:
            response = Response(
                status_code=resp.status,
                headers=dict(resp.headers.items()),
                body=resp.read(),
            )
    except urllib.error.HTTPError as exc:
        # A status >= 400 is still a completed request.
        response = Response(
            status_code=exc.code,
            headers=dict(exc.headers.items()) if exc.headers else {},
            body=exc.read(),
        )

    log.debug("GET %s → %d (%d bytes)", options.url, response.status_code, len(response.body))
    return response


def decode_body(response: Response, as_json: bool = False) -> Any:
    """Decode the body as UTF-8 text, parsing JSON when asked.

    A body that is not valid JSON is returned as text.
    """
    text = response.body.decode("utf-8", errors="replace")
    if not as_json:
        return text
    try:
        return json.loads(text)
    except ValueError:
        log.debug("Body is not JSON, returning %d chars of text", len(text))
        return text
