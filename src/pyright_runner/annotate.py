# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide which diagnostic severities become workflow annotations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from .errors import InvalidAnnotateValueError
from .severity import Severity

# pyright cannot produce usable JSON diagnostics when any of these are passed.
FLAGS_WITHOUT_COMMENTING_SUPPORT: Final[frozenset[str]] = frozenset(
    {
        "--verifytypes",
        "--stats",
        "--verbose",
        "--createstub",
        "--dependencies",
    }
)

_ANNOTATE_TOKENS: Final[dict[str, Severity]] = {
    "errors": Severity.ERROR,
    "warnings": Severity.WARNING,
}


def _is_none(value: str) -> bool:
    return value.lower() in {"none", "false"}


def _is_all(value: str) -> bool:
    return value.lower() in {"all", "true"}


def build_annotation_set(
    directive: str,
    *,
    no_comments: bool = False,
    args: Sequence[str] = (),
) -> frozenset[Severity]:
    """Return the severities to annotate for the ``annotate`` input *directive*.

    Args:
        directive: Raw input, e.g. ``"all"``, ``"none"`` or ``"errors, warnings"``.
        no_comments: Suppress every annotation regardless of *directive*.
        args: The pyright argument vector; some flags disable annotations.

    Raises:
        InvalidAnnotateValueError: For any entry other than ``errors`` or
            ``warnings`` once the ``all``/``none`` shortcuts are expanded.
    """

    value = directive.strip() or "all"
    if _is_none(value):
        value = ""
    elif _is_all(value):
        value = "errors, warnings"

    tokens = [part.strip() for part in value.split(",")] if value else []
    selected: set[Severity] = set()
    for token in tokens:
        severity = _ANNOTATE_TOKENS.get(token)
        if severity is None:
            raise InvalidAnnotateValueError(token, in_list=_is_all(token) or _is_none(token))
        selected.add(severity)

    if no_comments or any(arg in FLAGS_WITHOUT_COMMENTING_SUPPORT for arg in args):
        return frozenset()
    return frozenset(selected)


__all__ = ["FLAGS_WITHOUT_COMMENTING_SUPPORT", "build_annotation_set"]
