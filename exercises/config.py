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

"""Loads the exercises YAML settings into typed dataclasses.

Pure loader — no exercise logic. Missing keys fall back to DEFAULT_CONFIG.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from exercises.primitives import DEFAULT_MAX_WORKERS
from exercises.result import Fail, Ok, Result

STYLES = ("promise", "callback", "both")


# ── Runner ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class RunnerConfig:
    """How the CLI exercises an operation."""
    style: str = "promise"
    timeout_seconds: float | None = 30
    max_workers: int = DEFAULT_MAX_WORKERS


# ── Logging ────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: str = "INFO"


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ExercisesConfig:
    runner: RunnerConfig = RunnerConfig()
    logging: LoggingConfig = LoggingConfig()


DEFAULT_CONFIG = ExercisesConfig()


# ── Loader ─────────────────────────────────────────────────────

def _build_runner(raw: dict[str, Any]) -> RunnerConfig:
    base = DEFAULT_CONFIG.runner
    timeout = raw.get("timeout_seconds", base.timeout_seconds)
    return RunnerConfig(
        style=str(raw.get("style", base.style)),
        timeout_seconds=None if timeout is None else float(timeout),
        max_workers=int(raw.get("max_workers", base.max_workers)),
    )


def _build_logging(raw: dict[str, Any]) -> LoggingConfig:
    return LoggingConfig(level=str(raw.get("level", DEFAULT_CONFIG.logging.level)).upper())


def _validate(config: ExercisesConfig) -> str | None:
    runner = config.runner
    if runner.style not in STYLES:
        return f"Unknown runner.style '{runner.style}' (expected one of {', '.join(STYLES)})"
    if runner.timeout_seconds is not None and runner.timeout_seconds <= 0:
        return f"runner.timeout_seconds must be positive, got {runner.timeout_seconds}"
    if runner.max_workers < 1:
        return f"runner.max_workers must be >= 1, got {runner.max_workers}"
    return None


def load_config(path: Path) -> Result[ExercisesConfig]:
    """Load the YAML settings file into ExercisesConfig."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw: dict[str, Any] | None = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    if raw is None:
        return Ok(data=DEFAULT_CONFIG)

    try:
        config = ExercisesConfig(
            runner=_build_runner(raw.get("runner") or {}),
            logging=_build_logging(raw.get("logging") or {}),
        )
    except (AttributeError, TypeError, ValueError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    problem = _validate(config)
    if problem is not None:
        return Fail(error=problem, context=str(path))

    return Ok(data=config)
