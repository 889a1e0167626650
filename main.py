# SPDX-License-Identifier: MIT
"""
 █████╗ ██████╗  █████╗ ███████╗
██╔══██╗██╔══██╗██╔══██╗██╔════╝
███████║██████╔╝███████║███████╗
██╔══██║██╔══██╗██╔══██║╚════██║
██║  ██║██║  ██║██║  ██║███████║
╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>

Licensed under the MIT License.
See LICENSE and THIRD_PARTY_LICENSES for details.

Async Delivery Exercises

Runs one exercise through the promise form, the error-first callback form,
or both, and prints the result.

Operations:
  first-line PATH   first line of a UTF-8 file
  status URL        HTTP status code of a GET
  profile USER      GitHub profile JSON
  token             40-char hex random token
  funny PATH        file with " lol" appended to every line

Usage: python main.py first-line README.md --style=both
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from exercises import primitives
from exercises.config import DEFAULT_CONFIG, STYLES, load_config
from exercises.logger import get_logger, set_level
from exercises.runner import OPERATIONS, run_operation

log = get_logger("main")


def _format(value: object) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2, ensure_ascii=False)
    return str(value)


def _operations_help() -> str:
    lines = ["operations:"]
    for name in sorted(OPERATIONS):
        op = OPERATIONS[name]
        lines.append(f"  {name:<12}{op.description} ({op.arity} argument(s))")
    return "\n".join(lines)


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="exercises",
        description="Deliver an async result via promise, callback, or both",
        epilog=_operations_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS))
    parser.add_argument("args", nargs="*", help="Operation argument (path, URL or username)")
    parser.add_argument("--style", choices=STYLES, help="Delivery convention (default from config)")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(os.environ["EXERCISES_CONFIG"]) if os.getenv("EXERCISES_CONFIG") else None,
        help="Path to settings YAML (default: $EXERCISES_CONFIG, else built-in defaults)",
    )
    args = parser.parse_args()

    config = DEFAULT_CONFIG
    if args.config is not None:
        cfg_result = load_config(args.config.resolve())
        if not cfg_result.ok:
            log.error(cfg_result.error)
            return 1
        config = cfg_result.data

    try:
        set_level(os.getenv("EXERCISES_LOG_LEVEL", config.logging.level))
    except ValueError as exc:
        log.error(exc)
        return 1

    op = OPERATIONS[args.operation]
    if len(args.args) != op.arity:
        parser.error(f"{op.name} takes {op.arity} argument(s), got {len(args.args)}")

    primitives.configure(config.runner.max_workers, request_timeout=config.runner.timeout_seconds)
    style = args.style or config.runner.style

    try:
        report = asyncio.run(
            run_operation(op.name, args.args, style=style, timeout=config.runner.timeout_seconds)
        )
    finally:
        primitives.shutdown(wait=False)

    for name, result in report.results.items():
        if result.ok:
            print(f"[{name}] {_format(result.data)}")
        else:
            log.error("[%s] %s", name, result.error)

    if not report.equivalent:
        log.error("Callback and promise forms returned different outcomes")

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
