# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while preparing and running pyright."""

from __future__ import annotations


class PyrightRunnerError(RuntimeError):
    """Base class for failures that abort a pyright run."""


class ConfigError(PyrightRunnerError):
    """Raised when input configuration cannot be loaded."""


class InvalidVersionError(PyrightRunnerError):
    """Raised when a version string is not a valid semantic version."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid version: {value!r}")
        self.value = value


class UpstreamFetchError(PyrightRunnerError):
    """Raised when a metadata or artifact request does not return HTTP 200."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ManifestParseError(PyrightRunnerError):
    """Raised when release metadata does not have the expected shape."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class MalformedArgsError(PyrightRunnerError):
    """Raised when ``extra-args`` cannot be split into plain words."""

    def __init__(self, value: str) -> None:
        super().__init__(f"malformed extra-args: {value}")
        self.value = value


class InvalidAnnotateValueError(PyrightRunnerError):
    """Raised for unrecognised entries in the ``annotate`` input."""

    def __init__(self, value: str, *, in_list: bool = False) -> None:
        quoted = _json_quote(value)
        if in_list:
            message = f"invalid value {quoted} in comma-separated annotate"
        else:
            message = f"invalid value {quoted} for annotate"
        super().__init__(message)
        self.value = value
        self.in_list = in_list


class ArtifactError(PyrightRunnerError):
    """Raised when a downloaded pyright package cannot be unpacked or used."""


class ReportParseError(PyrightRunnerError):
    """Raised when pyright's JSON output does not match the report shape."""


def _json_quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


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
]
