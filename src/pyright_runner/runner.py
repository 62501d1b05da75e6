# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Prepare a pyright invocation, run it, and report the results."""

from __future__ import annotations

import shlex
from collections.abc import Callable
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path
from subprocess import CompletedProcess

from .annotate import build_annotation_set
from .arguments import build_args
from .artifacts import PyrightArtifactProvider
from .config import ActionInputs
from .formatting import diagnostic_to_string, pluralize, summarize
from .github import issue_command, set_failed
from .logging import log
from .process import NodeInfo, run_pyright
from .schema import Report, parse_report
from .severity import Severity, is_annotatable
from .versioning import VersionResolver, parse_version

PyrightInvoker = Callable[..., CompletedProcess[str]]


def get_runner_version() -> str:
    """Return the installed version of this package."""

    try:
        return distribution_version("pyright-runner")
    except PackageNotFoundError:
        return "unknown"


@dataclass(frozen=True, slots=True)
class RunPlan:
    """Everything needed to invoke pyright once."""

    working_directory: str
    annotate: frozenset[Severity]
    pyright_version: str
    args: tuple[str, ...]


def prepare_run(
    inputs: ActionInputs,
    provider: PyrightArtifactProvider,
    resolver: VersionResolver | None = None,
) -> RunPlan:
    """Resolve, fetch and configure pyright for *inputs*."""

    resolver = resolver or VersionResolver()
    version_spec = resolver.resolve(inputs.version, inputs.pylance_version)
    info = provider.fetch_info(version_spec)
    version = parse_version(info.version)
    artifact = provider.ensure(info)

    args = build_args(inputs, version, artifact)
    annotate = build_annotation_set(inputs.annotate, no_comments=bool(inputs.no_comments), args=args)

    return RunPlan(
        working_directory=inputs.working_directory,
        annotate=annotate,
        pyright_version=info.version,
        args=args,
    )


def print_info(plan: RunPlan, node: NodeInfo, cwd: Path) -> None:
    log(f"pyright {plan.pyright_version}, node {node.version}, pyright-runner {get_runner_version()}")
    log(f"Working directory: {cwd}")
    log(f"Running: {node.exec_path} {shlex.join(plan.args)}")


def report_diagnostics(report: Report, annotate: frozenset[Severity]) -> None:
    """Log every diagnostic and annotate those whose severity is selected."""

    for diag in report.general_diagnostics:
        log(diagnostic_to_string(diag, for_command=False))
        if not is_annotatable(diag.severity) or diag.severity not in annotate:
            continue
        start = diag.range.start if diag.range is not None else None
        line = start.line if start is not None else 0
        col = start.character if start is not None else 0
        # Duplicates the log line above, but reads better in commit comments.
        issue_command(
            diag.severity.value,
            {"file": diag.file, "line": line + 1, "col": col + 1},
            diagnostic_to_string(diag, for_command=True),
        )
    log(summarize(report.summary))


def execute(
    plan: RunPlan,
    node: NodeInfo,
    *,
    cwd: Path | None = None,
    invoke: PyrightInvoker = run_pyright,
) -> int:
    """Run pyright for *plan* and return the process exit status to use."""

    if not plan.annotate:
        # Without annotations there is no need for JSON; let pyright print its own report.
        completed = invoke(node, plan.args, cwd=cwd)
        if completed.returncode != 0:
            set_failed(f"Exit code {completed.returncode}")
            return 1
        return 0

    completed = invoke(node, [*plan.args, "--outputjson"], cwd=cwd, capture_stdout=True)
    stdout = completed.stdout or ""
    if not stdout.strip():
        set_failed(f"Exit code {completed.returncode}")
        return 1

    report = parse_report(stdout)
    report_diagnostics(report, plan.annotate)

    if completed.returncode != 0:
        set_failed(pluralize(report.summary.error_count, "error", "errors"))
        return 1
    return 0


def resolve_working_directory(plan: RunPlan, base: Path) -> Path:
    """Return the directory pyright runs in.

    Args:
        plan: Prepared run whose ``working_directory`` is relative to *base*.
        base: Directory the runner was started from.

    Returns:
        Path: Resolved working directory, or *base* when none was given.
    """

    if plan.working_directory:
        return (base / plan.working_directory).resolve()
    return base


__all__ = [
    "PyrightInvoker",
    "RunPlan",
    "execute",
    "get_runner_version",
    "prepare_run",
    "print_info",
    "report_diagnostics",
    "resolve_working_directory",
]
