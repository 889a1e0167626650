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

import subprocess
import sys
from pathlib import Path

import pytest

import main
from exercises.runner import OPERATIONS

REPO_ROOT = Path(__file__).resolve().parent.parent


def _run(monkeypatch, *argv):
    monkeypatch.delenv("EXERCISES_CONFIG", raising=False)
    monkeypatch.delenv("EXERCISES_LOG_LEVEL", raising=False)
    monkeypatch.setattr(sys, "argv", ["exercises", *argv])
    return main.main()


def test_cli_runs_both_styles(monkeypatch, capsys, write_file):
    assert _run(monkeypatch, "funny", write_file("a\nb"), "--style", "both") == 0
    out = capsys.readouterr().out
    assert "[callback] a lol\nb lol" in out
    assert "[promise] a lol\nb lol" in out


def test_cli_failure_exit_code(monkeypatch, tmp_path):
    assert _run(monkeypatch, "first-line", str(tmp_path / "nope.txt")) == 1


def test_cli_rejects_missing_config(monkeypatch, tmp_path):
    assert _run(monkeypatch, "token", "--config", str(tmp_path / "absent.yaml")) == 1


def test_cli_uses_config_style(monkeypatch, capsys, tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("runner:\n  style: callback\n", encoding="utf-8")
    assert _run(monkeypatch, "token", "--config", str(config)) == 0
    out = capsys.readouterr().out
    assert out.startswith("[callback] ")
    assert "[promise]" not in out


def test_cli_help_lists_operations(monkeypatch, capsys):
    with pytest.raises(SystemExit) as info:
        _run(monkeypatch, "--help")
    assert info.value.code == 0
    out = capsys.readouterr().out
    for op in OPERATIONS.values():
        assert op.name in out
        assert op.description in out


def test_cli_exits_after_timeout_on_silent_server(tmp_path, silent_url):
    config = tmp_path / "settings.yaml"
    config.write_text("runner:\n  style: promise\n  timeout_seconds: 0.5\n", encoding="utf-8")

    proc = subprocess.run(
        [sys.executable, "main.py", "status", silent_url, "--config", str(config)],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        timeout=15,
    )

    assert proc.returncode == 1
    assert "[promise]" in proc.stderr
