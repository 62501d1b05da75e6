# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render pyright diagnostics as text."""

from __future__ import annotations

from .schema import Diagnostic, Summary


def diagnostic_to_string(diag: Diagnostic, *, for_command: bool) -> str:
    """Render *diag* for the job log or for a workflow command.

    Log lines carry the ``file:line:col -`` location (1-based, omitted for an
    empty range) and the severity; workflow commands already carry the
    location, so only the message and rule are kept.
    """

    message = ""

    if not for_command:
        if diag.file:
            message += f"{diag.file}:"
        if diag.range is not None and not diag.range.is_empty():
            start = diag.range.start
            message += f"{start.line + 1}:{start.character + 1} -"
        message += f" {diag.severity.value}: "

    message += diag.message

    if diag.rule:
        message += f" ({diag.rule})"

    return message


def pluralize(n: int, singular: str, plural: str) -> str:
    """Return *n* followed by the singular or plural noun.

    Args:
        n: Count to render.
        singular: Noun used when *n* is exactly one.
        plural: Noun used otherwise, including zero.

    Returns:
        str: Text such as ``"1 error"`` or ``"0 warnings"``.
    """

    return f"{n} {singular if n == 1 else plural}"


def summarize(summary: Summary) -> str:
    """Return the closing ``N errors, N warnings, N informationals`` line."""

    return ", ".join(
        (
            pluralize(summary.error_count, "error", "errors"),
            pluralize(summary.warning_count, "warning", "warnings"),
            pluralize(summary.information_count, "informational", "informationals"),
        )
    )


__all__ = ["diagnostic_to_string", "pluralize", "summarize"]
