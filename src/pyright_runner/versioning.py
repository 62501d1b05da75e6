# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve which pyright release a run should use."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from semver import Version

from .errors import InvalidVersionError
from .fetch import FetchSettings, fetch_text
from .logging import log
from .schema import parse_pylance_build_metadata

LATEST: Final[str] = "latest"
PYLANCE_SENTINELS: Final[frozenset[str]] = frozenset({"latest-release", "latest-prerelease"})
PYLANCE_RELEASES_URL: Final[str] = (
    "https://raw.githubusercontent.com/microsoft/pylance-release/main/releases/{version}.json"
)

# pyright dropped the dashes from --typeshed-path and --venv-path in this release.
UNDASHED_FLAGS_SINCE: Final[Version] = Version(1, 1, 309)


def parse_version(text: str) -> Version:
    """Parse *text* as a semantic version.

    Surrounding whitespace and a single leading ``v`` are accepted.

    Raises:
        InvalidVersionError: If *text* is not a semantic version.
    """

    candidate = text.strip()
    if candidate[:1] in {"v", "V"}:
        candidate = candidate[1:]
    try:
        return Version.parse(candidate)
    except (ValueError, TypeError) as exc:
        raise InvalidVersionError(text) from exc


def normalize_version(text: str) -> str:
    """Return the canonical ``major.minor.patch[-prerelease]`` form of *text*."""

    return str(parse_version(text).replace(build=None))


def uses_dashed_flags(version: Version) -> bool:
    """Return ``True`` when *version* predates the undashed flag spelling."""

    return version < UNDASHED_FLAGS_SINCE


class VersionResolver:
    """Turn user inputs into the version spec used for the registry lookup."""

    def __init__(
        self,
        settings: FetchSettings | None = None,
        *,
        emit: Callable[[str], None] = log,
    ) -> None:
        self._settings = settings or FetchSettings()
        self._emit = emit

    def resolve(self, version_spec: str | None = None, pylance_version: str | None = None) -> str:
        """Return an exact pyright version, or ``"latest"``.

        An explicit *version_spec* wins and is normalised without any network
        access.  Otherwise *pylance_version* is looked up in the Pylance
        release manifests.  With neither, the registry's ``latest`` tag is used.
        """

        if version_spec:
            return normalize_version(version_spec)

        if pylance_version:
            if pylance_version not in PYLANCE_SENTINELS:
                parse_version(pylance_version)
            return self.pylance_pyright_version(pylance_version)

        return LATEST

    def pylance_pyright_version(self, pylance_version: str) -> str:
        """Return the pyright version bundled with *pylance_version*."""

        url = PYLANCE_RELEASES_URL.format(version=pylance_version)
        fetched = fetch_text(
            url,
            settings=self._settings,
            failure=f"Failed to download release metadata for Pylance {pylance_version}",
        )
        metadata = parse_pylance_build_metadata(fetched.text, url=fetched.url)
        self._emit(f"Pylance {pylance_version} uses pyright {metadata.pyright_version}")
        return metadata.pyright_version


__all__ = [
    "LATEST",
    "PYLANCE_SENTINELS",
    "UNDASHED_FLAGS_SINCE",
    "VersionResolver",
    "normalize_version",
    "parse_version",
    "uses_dashed_flags",
]
