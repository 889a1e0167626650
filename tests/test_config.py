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

from pathlib import Path

from exercises.config import DEFAULT_CONFIG, load_config

REPO_ROOT = Path(__file__).resolve().parent.parent


def _write(tmp_path, text):
    path = tmp_path / "exercises.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_repo_settings_file_loads():
    result = load_config(REPO_ROOT / "exercises.yaml")
    assert result.ok, result
    assert result.data.runner.style == "both"
    assert result.data.runner.timeout_seconds == 30
    assert result.data.logging.level == "INFO"


def test_missing_keys_fall_back_to_defaults(tmp_path):
    result = load_config(_write(tmp_path, "runner:\n  style: callback\n"))
    assert result.ok
    assert result.data.runner.style == "callback"
    assert result.data.runner.max_workers == DEFAULT_CONFIG.runner.max_workers
    assert result.data.logging == DEFAULT_CONFIG.logging


def test_empty_file_is_default(tmp_path):
    result = load_config(_write(tmp_path, ""))
    assert result.ok
    assert result.data == DEFAULT_CONFIG


def test_null_timeout_disables_it(tmp_path):
    result = load_config(_write(tmp_path, "runner:\n  timeout_seconds: null\n"))
    assert result.ok
    assert result.data.runner.timeout_seconds is None


def test_missing_file(tmp_path):
    result = load_config(tmp_path / "absent.yaml")
    assert not result.ok
    assert "not found" in result.error


def test_invalid_yaml(tmp_path):
    result = load_config(_write(tmp_path, "runner: [unclosed\n"))
    assert not result.ok
    assert result.error.startswith("YAML parse error")


def test_unknown_style(tmp_path):
    result = load_config(_write(tmp_path, "runner:\n  style: telepathy\n"))
    assert not result.ok
    assert "telepathy" in result.error


def test_wrong_structure(tmp_path):
    result = load_config(_write(tmp_path, "- just\n- a list\n"))
    assert not result.ok
    assert result.error.startswith("Config structure error")
