# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for node discovery and pyright invocation."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from pyright_runner.process import NodeInfo, NodeNotFoundError, get_node_info, run_pyright


def test_get_node_info(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args=args, returncode=0, stdout="v20.11.0\n", stderr="")

    monkeypatch.setattr("pyright_runner.process.shutil.which", lambda name: f"/opt/bin/{name}")
    monkeypatch.setattr("pyright_runner.process.subprocess.run", fake_run)

    assert get_node_info() == NodeInfo(version="v20.11.0", exec_path="/opt/bin/node")
    assert calls == [["/opt/bin/node", "--version"]]


def test_get_node_info_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pyright_runner.process.shutil.which", lambda name: None)
    with pytest.raises(NodeNotFoundError):
        get_node_info()


def test_get_node_info_failing_version(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args=args, returncode=9, stdout="", stderr="broken\n")

    monkeypatch.setattr("pyright_runner.process.subprocess.run", fake_run)
    with pytest.raises(NodeNotFoundError) as excinfo:
        get_node_info("/opt/node/bin/node")
    assert "broken" in str(excinfo.value)


def test_run_pyright_passes_arguments(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def fake_run(args, **kwargs):
        seen["args"] = list(args)
        seen.update(kwargs)
        return subprocess.CompletedProcess(args=args, returncode=0, stdout="{}")

    monkeypatch.setattr("pyright_runner.process.subprocess.run", fake_run)
    node = NodeInfo(version="v20", exec_path="/usr/bin/node")

    completed = run_pyright(node, ["index.js", "--outputjson"], cwd=tmp_path, capture_stdout=True)

    assert completed.stdout == "{}"
    assert seen["args"] == ["/usr/bin/node", "index.js", "--outputjson"]
    assert seen["cwd"] == str(tmp_path)
    assert seen["stdout"] is subprocess.PIPE
    assert seen["check"] is False
