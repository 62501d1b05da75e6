# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity levels reported by pyright."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity vocabulary used in pyright's JSON output."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


ANNOTATABLE_SEVERITIES: Final[frozenset[Severity]] = frozenset({Severity.ERROR, Severity.WARNING})


def is_annotatable(severity: Severity) -> bool:
    """Return ``True`` when *severity* may become a workflow annotation."""

    return severity in ANNOTATABLE_SEVERITIES


__all__ = ["ANNOTATABLE_SEVERITIES", "Severity", "is_annotatable"]
