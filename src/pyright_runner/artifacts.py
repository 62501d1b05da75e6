# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Download and cache pyright release tarballs from the npm registry."""

from __future__ import annotations

import io
import json
import os
import shutil
import tarfile
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from .errors import ArtifactError
from .fetch import FetchSettings, fetch_bytes, fetch_text
from .schema import NpmRegistryResponse, parse_npm_registry_response

TOOL_NAME: Final[str] = "pyright"
REGISTRY_URL: Final[str] = "https://registry.npmjs.org/pyright/{version}"
COMPLETE_MARKER: Final[str] = ".complete"
META_FILE: Final[str] = ".pyright-runner-meta.json"


def default_cache_root(environ: Mapping[str, str] | None = None) -> Path:
    """Return the tool cache root: ``$RUNNER_TOOL_CACHE`` or a user cache directory."""

    source = os.environ if environ is None else environ
    tool_cache = source.get("RUNNER_TOOL_CACHE", "").strip()
    if tool_cache:
        return Path(tool_cache)
    return Path.home() / ".cache" / "pyright-runner"


class PyrightArtifactProvider:
    """Resolve registry metadata and keep unpacked pyright packages on disk.

    The pyright npm package has no dependencies, so extracting its tarball is
    enough to obtain a runnable ``package/index.js``.
    """

    def __init__(self, cache_root: Path, settings: FetchSettings | None = None) -> None:
        self.cache_root = cache_root
        self._settings = settings or FetchSettings()

    def fetch_info(self, version_spec: str) -> NpmRegistryResponse:
        """Return registry metadata for *version_spec* (an exact version or ``latest``)."""

        url = REGISTRY_URL.format(version=version_spec)
        fetched = fetch_text(
            url,
            settings=self._settings,
            failure=f"Failed to download metadata for pyright {version_spec}",
        )
        return parse_npm_registry_response(fetched.text, url=fetched.url)

    def cache_dir(self, version: str) -> Path:
        """Return the cache location for *version*, whether or not it is populated."""

        return self.cache_root / TOOL_NAME / version

    def find(self, version: str) -> Path | None:
        """Return the cached package directory for *version* when complete."""

        directory = self.cache_dir(version)
        if (directory / COMPLETE_MARKER).is_file():
            return directory
        return None

    def ensure(self, info: NpmRegistryResponse) -> Path:
        """Return a directory holding the unpacked release described by *info*."""

        found = self.find(info.version)
        if found is not None:
            return found

        payload = fetch_bytes(
            info.dist.tarball,
            settings=self._settings,
            failure=f"Failed to download pyright {info.version}",
        )
        return self._install(info, payload)

    def _install(self, info: NpmRegistryResponse, payload: bytes) -> Path:
        target = self.cache_dir(info.version)
        target.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{info.version}-", dir=target.parent))
        try:
            _extract_tarball(payload, staging, source=info.dist.tarball)
            if not (staging / "package" / "index.js").is_file():
                raise ArtifactError(f"pyright {info.version} tarball has no package/index.js")
            (staging / META_FILE).write_text(
                json.dumps({"version": info.version, "tarball": info.dist.tarball}),
                encoding="utf-8",
            )
            (staging / COMPLETE_MARKER).write_text("", encoding="utf-8")
            if target.exists():
                shutil.rmtree(target)
            staging.rename(target)
        finally:
            if staging.exists():
                shutil.rmtree(staging, ignore_errors=True)
        return target


def _extract_tarball(payload: bytes, destination: Path, *, source: str) -> None:
    try:
        with tarfile.open(fileobj=io.BytesIO(payload), mode="r:*") as archive:
            # The "data" filter rejects absolute paths, traversal and links leaving the target.
            archive.extractall(destination, filter="data")
    except tarfile.TarError as exc:
        raise ArtifactError(f"{source}: unable to extract archive: {exc}") from exc


__all__ = [
    "COMPLETE_MARKER",
    "PyrightArtifactProvider",
    "REGISTRY_URL",
    "default_cache_root",
]
