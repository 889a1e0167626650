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

"""Domain errors.

I/O and network failures are never wrapped: callers receive the platform
exception (``OSError`` subclasses, ``urllib.error.URLError``) as raised.
Only failures that the exercises themselves detect live here.
"""

from __future__ import annotations

from typing import Any


class ExerciseError(Exception):
    """Base class for failures detected by the exercises, not the platform."""


class GitHubProfileError(ExerciseError):
    """The GitHub API answered, but its body carries a ``message`` field."""

    def __init__(self, api_message: str) -> None:
        super().__init__(f"Failed to get GitHub profile: {api_message}")
        self.api_message = api_message


class RejectionError(ExerciseError):
    """A promise was rejected with something that is not an exception."""

    def __init__(self, reason: Any) -> None:
        super().__init__(f"Promise rejected with non-exception value: {reason!r}")
        self.reason = reason


class OutcomeError(ExerciseError):
    """A Fail outcome that carries a message but no original exception."""
