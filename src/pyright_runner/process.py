# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate node and run pyright under it."""

from __future__ import annotations

import shutil

# Bandit: pyright is launched from an argument list; no shell is involved.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import PyrightRunnerError


class NodeNotFoundError(PyrightRunnerError):
    """Raised when no ``node`` executable can be found."""


@dataclass(frozen=True, slots=True)
class NodeInfo:
    """The node runtime that executes pyright."""

    version: str
    exec_path: str


def get_node_info(executable: str = "node") -> NodeInfo:
    """Return the version and absolute path of *executable*."""

    resolved = executable if Path(executable).is_absolute() else shutil.which(executable)
    if resolved is None:
        raise NodeNotFoundError(f"Executable '{executable}' was not found on PATH")
    completed = subprocess.run(  # nosec B603
        [resolved, "--version"],
        capture_output=True,
        text=True,
        check=False,
        stdin=subprocess.DEVNULL,
    )
    if completed.returncode != 0:
        raise NodeNotFoundError(
            f"'{resolved} --version' exited with status {completed.returncode}: {completed.stderr.strip()}"
        )
    return NodeInfo(version=completed.stdout.strip(), exec_path=resolved)


def run_pyright(
    node: NodeInfo,
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    capture_stdout: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run ``node <args>``; stderr is always inherited.

    With *capture_stdout* the JSON report is collected, otherwise pyright's
    own output goes straight to the job log.
    """

    return subprocess.run(  # nosec B603
        [node.exec_path, *args],
        cwd=str(cwd) if cwd is not None else None,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE if capture_stdout else None,
        encoding="utf-8",
        check=False,
    )


__all__ = ["NodeInfo", "NodeNotFoundError", "get_node_info", "run_pyright"]
