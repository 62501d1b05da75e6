# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point for ``pyright-runner``."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from .artifacts import PyrightArtifactProvider, default_cache_root
from .config import ActionInputs, load_inputs, parse_overrides
from .errors import PyrightRunnerError
from .github import in_github_actions, set_failed
from .logging import fail, info, log
from .process import get_node_info
from .runner import RunPlan, execute, prepare_run, print_info, resolve_working_directory
from .versioning import VersionResolver

app = typer.Typer(
    help="Run a pinned pyright release and report its diagnostics.",
    add_completion=False,
    no_args_is_help=True,
)

INPUT_OPTION = typer.Option(
    None,
    "--input",
    "-i",
    help="Set an input as name=value; overrides the matching INPUT_* variable.",
)
CACHE_DIR_OPTION = typer.Option(
    None,
    "--cache-dir",
    help="Tool cache root; defaults to $RUNNER_TOOL_CACHE or ~/.cache/pyright-runner.",
)
EMOJI_OPTION = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in CLI output.")


def _load(overrides: list[str] | None, working_directory: str | None) -> ActionInputs:
    values = parse_overrides(overrides or [])
    if working_directory is not None:
        values["working-directory"] = working_directory
    return load_inputs(os.environ, values)


def _abort(exc: PyrightRunnerError, *, use_emoji: bool) -> typer.Exit:
    fail(str(exc), use_emoji=use_emoji)
    if in_github_actions():
        set_failed(str(exc))
    return typer.Exit(code=1)


def _plan(inputs: ActionInputs, cache_dir: Path | None) -> RunPlan:
    provider = PyrightArtifactProvider(cache_dir or default_cache_root())
    return prepare_run(inputs, provider, VersionResolver())


@app.command("run")
def run_command(
    inputs: list[str] | None = INPUT_OPTION,
    working_directory: str | None = typer.Option(
        None,
        "--working-directory",
        help="Directory to run pyright in, relative to the current directory.",
    ),
    cache_dir: Path | None = CACHE_DIR_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Download pyright if needed, run it, and annotate its diagnostics."""

    try:
        loaded = _load(inputs, working_directory)
        node = get_node_info()
        plan = _plan(loaded, cache_dir)
        cwd = resolve_working_directory(plan, Path.cwd())
        print_info(plan, node, cwd)
        code = execute(plan, node, cwd=cwd)
    except PyrightRunnerError as exc:
        raise _abort(exc, use_emoji=emoji) from exc
    raise typer.Exit(code=code)


@app.command("args")
def args_command(
    inputs: list[str] | None = INPUT_OPTION,
    cache_dir: Path | None = CACHE_DIR_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Print the pyright argument vector, one argument per line, without running it."""

    try:
        plan = _plan(_load(inputs, None), cache_dir)
    except PyrightRunnerError as exc:
        raise _abort(exc, use_emoji=emoji) from exc
    info(f"pyright {plan.pyright_version}", use_emoji=emoji)
    for arg in plan.args:
        log(arg)
    annotate = ", ".join(sorted(severity.value for severity in plan.annotate)) or "none"
    info(f"Annotating: {annotate}", use_emoji=emoji)


@app.command("resolve")
def resolve_command(
    inputs: list[str] | None = INPUT_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Print the pyright version the inputs select (``latest`` when unpinned)."""

    try:
        loaded = _load(inputs, None)
        resolved = VersionResolver().resolve(loaded.version, loaded.pylance_version)
    except PyrightRunnerError as exc:
        raise _abort(exc, use_emoji=emoji) from exc
    log(resolved)


def main() -> None:
    app()


__all__ = ["app", "main"]
