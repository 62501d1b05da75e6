# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models for the JSON documents exchanged with upstream services.

Three payloads are consumed: the npm registry entry describing a pyright
release, the Pylance release manifest that pins a pyright version, and the
report pyright prints when invoked with ``--outputjson``.  Only the fields the
runner relies on are modelled; everything else is ignored.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ManifestParseError, ReportParseError
from .severity import Severity


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Position(_Payload):
    """Zero-based position within a source file."""

    line: int
    character: int


class Range(_Payload):
    """Span between two positions."""

    start: Position
    end: Position

    def is_empty(self) -> bool:
        """Return ``True`` when the range starts and ends at the same position."""
        return self.start.line == self.end.line and self.start.character == self.end.character


class Diagnostic(_Payload):
    """Single diagnostic emitted by pyright."""

    file: str | None = None
    range: Range | None = None
    severity: Severity
    message: str
    rule: str | None = None


class Summary(_Payload):
    """Diagnostic counters reported alongside the diagnostics."""

    files_analyzed: int = Field(default=0, alias="filesAnalyzed")
    error_count: int = Field(alias="errorCount")
    warning_count: int = Field(alias="warningCount")
    information_count: int = Field(alias="informationCount")
    time_in_sec: float | None = Field(default=None, alias="timeInSec")


class Report(_Payload):
    """Document printed by ``pyright --outputjson``."""

    version: str | None = None
    general_diagnostics: tuple[Diagnostic, ...] = Field(alias="generalDiagnostics")
    summary: Summary


class NpmDist(_Payload):
    tarball: str


class NpmRegistryResponse(_Payload):
    """Subset of the npm registry document for one package version."""

    version: str
    dist: NpmDist


class PylanceBuildMetadata(_Payload):
    """Release manifest published for each Pylance build."""

    pyright_version: str = Field(alias="pyrightVersion")


def parse_npm_registry_response(body: str, *, url: str | None = None) -> NpmRegistryResponse:
    """Validate the registry document returned for a pyright version."""

    payload = _loads(body, url=url, what="npm registry response")
    try:
        return NpmRegistryResponse.model_validate(payload)
    except ValidationError as exc:
        raise ManifestParseError(f"Unexpected npm registry response from {url}: {exc}", url=url) from exc


def parse_pylance_build_metadata(body: str, *, url: str | None = None) -> PylanceBuildMetadata:
    """Validate a Pylance release manifest and return its pinned pyright version."""

    payload = _loads(body, url=url, what="Pylance release metadata")
    try:
        return PylanceBuildMetadata.model_validate(payload)
    except ValidationError as exc:
        raise ManifestParseError(f"Unexpected Pylance release metadata from {url}: {exc}", url=url) from exc


def parse_report(stdout: str) -> Report:
    """Parse pyright's ``--outputjson`` output."""

    try:
        payload = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise ReportParseError(f"pyright output is not valid JSON: {exc}") from exc
    try:
        return Report.model_validate(payload)
    except ValidationError as exc:
        raise ReportParseError(f"unexpected pyright report: {exc}") from exc


def _loads(body: str, *, url: str | None, what: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"{what} from {url} is not valid JSON: {exc}", url=url) from exc


__all__ = [
    "Diagnostic",
    "NpmRegistryResponse",
    "Position",
    "PylanceBuildMetadata",
    "Range",
    "Report",
    "Summary",
    "parse_npm_registry_response",
    "parse_pylance_build_metadata",
    "parse_report",
]
