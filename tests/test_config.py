# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for input loading."""

from __future__ import annotations

import pytest

from pyright_runner.config import INPUT_NAMES, interpret_flag, load_inputs, parse_overrides
from pyright_runner.errors import ConfigError
from pyright_runner.github import input_env_name


def test_input_env_name_keeps_dashes() -> None:
    assert input_env_name("python-version") == "INPUT_PYTHON-VERSION"
    assert input_env_name("some name") == "INPUT_SOME_NAME"


def test_load_inputs_from_environment() -> None:
    environ = {
        "INPUT_VERSION": " 1.1.350 ",
        "INPUT_PYTHON-VERSION": "3.12",
        "INPUT_STATS": "True",
        "INPUT_WARNINGS": "false",
        "INPUT_NO-COMMENTS": "",
        "INPUT_EXTRA-ARGS": "--outputjson",
        "UNRELATED": "x",
    }

    inputs = load_inputs(environ)

    assert inputs.version == "1.1.350"
    assert inputs.python_version == "3.12"
    assert inputs.stats is True
    assert inputs.warnings is False
    assert inputs.no_comments is None
    assert inputs.lib is None
    assert inputs.extra_args == "--outputjson"
    assert inputs.annotate == ""


def test_overrides_take_precedence() -> None:
    inputs = load_inputs({"INPUT_LEVEL": "warning"}, {"level": "error", "lib": "TRUE"})
    assert inputs.level == "error"
    assert inputs.lib is True


def test_inputs_are_frozen() -> None:
    inputs = load_inputs({})
    with pytest.raises(ValueError):
        inputs.level = "error"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("", None), ("  ", None), ("TRUE", True), ("true", True), ("FALSE", False), ("1", False)],
)
def test_interpret_flag(raw: str | None, expected: bool | None) -> None:
    assert interpret_flag(raw) is expected


def test_parse_overrides() -> None:
    assert parse_overrides(["level=error", "extra-args=a=b c"]) == {"level": "error", "extra-args": "a=b c"}


@pytest.mark.parametrize("entry", ["level", "=error", "unknown=1"])
def test_parse_overrides_rejects(entry: str) -> None:
    with pytest.raises(ConfigError):
        parse_overrides([entry])


def test_input_names_use_dashed_spelling() -> None:
    assert "pylance-version" in INPUT_NAMES
    assert "verify-types" in INPUT_NAMES
    assert "python_version" not in INPUT_NAMES
