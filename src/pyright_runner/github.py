# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitHub Actions input and workflow-command helpers."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from .logging import get_console

INPUT_PREFIX: Final[str] = "INPUT_"


def input_env_name(name: str) -> str:
    """Return the environment variable the runner sets for input *name*."""

    return f"{INPUT_PREFIX}{name.replace(' ', '_').upper()}"


def get_input(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the trimmed value of input *name*, or ``""`` when unset."""

    source = os.environ if environ is None else environ
    return source.get(input_env_name(name), "").strip()


def in_github_actions(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when running inside a GitHub Actions job."""

    source = os.environ if environ is None else environ
    return source.get("GITHUB_ACTIONS", "").lower() == "true"


def escape_data(value: object) -> str:
    """Escape a workflow command message (``%``, CR and LF)."""

    return _to_command_value(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: object) -> str:
    """Escape a workflow command property value; also encodes ``:`` and ``,``."""

    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, properties: Mapping[str, object | None], message: object) -> str:
    """Render a workflow command such as ``::error file=a.py,line=3::boom``.

    Properties whose value is falsy are omitted.
    """

    rendered = ",".join(f"{key}={escape_property(value)}" for key, value in properties.items() if value)
    head = f"::{command} {rendered}" if rendered else f"::{command}"
    return f"{head}::{escape_data(message)}"


def issue_command(command: str, properties: Mapping[str, object | None], message: object) -> None:
    """Write a workflow command to stdout."""

    get_console(color=False, emoji=False).print(format_command(command, properties, message))


def set_failed(message: str) -> None:
    """Mark the step failed by emitting an ``error`` workflow command."""

    issue_command("error", {}, message)


def _to_command_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


__all__ = [
    "escape_data",
    "escape_property",
    "format_command",
    "get_input",
    "in_github_actions",
    "input_env_name",
    "issue_command",
    "set_failed",
]
