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

"""Structured logger with per-style counters and final summary.

Collects success/fail counts per delivery style so the runner can print a
summary block after an operation has been exercised.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"
_ROOT = "exercises"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def set_level(level: str | int) -> None:
    """Apply a level to every logger handed out under the package namespace."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    manager = logging.Logger.manager
    for name, logger in list(manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name == _ROOT or name.startswith(_ROOT + ".") or name == "main":
            logger.setLevel(level)


@dataclass
class StyleCounter:
    """Tracks success/fail counts for a single delivery style."""

    name: str
    ok: int = 0
    failed: int = 0
    elapsed: float = 0.0


@dataclass
class RunSummary:
    """Accumulates counters across the delivery styles of one operation run.

    ``agreed`` stays None until two styles have been compared.
    """

    operation: str = ""
    styles: dict[str, StyleCounter] = field(default_factory=dict)
    agreed: bool | None = None

    def counter(self, name: str) -> StyleCounter:
        """Get or create a counter for a named style."""
        if name not in self.styles:
            self.styles[name] = StyleCounter(name=name)
        return self.styles[name]

    def report(self) -> str:
        """Format a human-readable summary block."""
        title = f"Run Summary: {self.operation}" if self.operation else "Run Summary"
        lines: list[str] = ["", title, "=" * 40]
        for style in self.styles.values():
            parts = [f"{style.name}: {style.ok} ok"]
            if style.failed:
                parts.append(f"{style.failed} failed")
            parts.append(f"{style.elapsed:.3f}s")
            lines.append("  ".join(parts))
        if self.agreed is not None:
            lines.append("conventions: " + ("agree" if self.agreed else "DISAGREE"))
        lines.append("=" * 40)
        return "\n".join(lines)
