# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run pinned pyright releases and report their diagnostics for CI."""

from __future__ import annotations

from .annotate import build_annotation_set
from .arguments import build_args, tokenize_extra_args
from .errors import (
    ArtifactError,
    ConfigError,
    InvalidAnnotateValueError,
    InvalidVersionError,
    MalformedArgsError,
    ManifestParseError,
    PyrightRunnerError,
    ReportParseError,
    UpstreamFetchError,
)
from .formatting import diagnostic_to_string, pluralize
from .versioning import VersionResolver, parse_version

__all__ = [
    "ArtifactError",
    "ConfigError",
    "InvalidAnnotateValueError",
    "InvalidVersionError",
    "MalformedArgsError",
    "ManifestParseError",
    "PyrightRunnerError",
    "ReportParseError",
    "UpstreamFetchError",
    "VersionResolver",
    "build_annotation_set",
    "build_args",
    "diagnostic_to_string",
    "parse_version",
    "pluralize",
    "tokenize_extra_args",
]
