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

"""Result pattern for the two delivery conventions.

Provides Ok[T] and Fail types as a value-level outcome. Every outcome can be
flattened into the error-first pair a completion callback receives, and
rebuilt from one, by looking at which slot is populated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from exercises.errors import OutcomeError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)

    def to_callback_args(self) -> tuple[None, T]:
        return None, self.data

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message and optional context.

    When the failure came from an exception, ``context`` is that exception.
    """

    error: str
    context: Any = None
    ok: bool = field(default=False, init=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> Fail:
        message = str(exc) or type(exc).__name__
        return cls(error=f"{type(exc).__name__}: {message}", context=exc)

    @property
    def exception(self) -> BaseException:
        if isinstance(self.context, BaseException):
            return self.context
        return OutcomeError(self.error)

    def to_callback_args(self) -> tuple[BaseException, None]:
        return self.exception, None

    def unwrap(self) -> Any:
        raise self.exception


Result = Ok[T] | Fail


def from_callback_args(err: BaseException | None, value: Any = None) -> Result[Any]:
    """Fold an error-first ``(err, value)`` pair into a Result."""
    if err is not None:
        return Fail.from_exception(err)
    return Ok(data=value)
