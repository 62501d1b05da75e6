# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for pyright version resolution."""

from __future__ import annotations

import pytest
import requests
from semver import Version

from pyright_runner.errors import InvalidVersionError, ManifestParseError, UpstreamFetchError
from pyright_runner.versioning import (
    LATEST,
    PYLANCE_RELEASES_URL,
    VersionResolver,
    normalize_version,
    parse_version,
    uses_dashed_flags,
)


def _resolver(messages: list[str] | None = None) -> VersionResolver:
    sink = messages if messages is not None else []
    return VersionResolver(emit=sink.append)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1.1.309", "1.1.309"),
        (" v1.1.300 ", "1.1.300"),
        ("1.2.3-beta.1", "1.2.3-beta.1"),
        ("1.2.3+build.7", "1.2.3"),
    ],
)
def test_explicit_version_is_normalised_without_network(fake_registry, raw: str, expected: str) -> None:
    assert _resolver().resolve(raw, None) == expected
    assert fake_registry.calls == []


def test_explicit_version_wins_over_pylance(fake_registry) -> None:
    assert _resolver().resolve("1.1.350", "2024.1.1") == "1.1.350"
    assert fake_registry.calls == []


@pytest.mark.parametrize("raw", ["1.2", "latest", "not-a-version", "1.2.3.4"])
def test_invalid_explicit_version(raw: str) -> None:
    with pytest.raises(InvalidVersionError) as excinfo:
        _resolver().resolve(raw, None)
    assert raw in str(excinfo.value)


def test_no_inputs_means_latest(fake_registry) -> None:
    assert _resolver().resolve(None, None) == LATEST
    assert _resolver().resolve("", "") == LATEST
    assert fake_registry.calls == []


@pytest.mark.parametrize("pylance", ["latest-release", "latest-prerelease", "2024.2.1"])
def test_pylance_lookup(fake_registry, pylance: str) -> None:
    url = PYLANCE_RELEASES_URL.format(version=pylance)
    fake_registry.add_json(url, {"pylanceVersion": pylance, "pyrightVersion": "1.1.351"})
    messages: list[str] = []

    assert _resolver(messages).resolve(None, pylance) == "1.1.351"
    assert fake_registry.calls == [url]
    assert messages == [f"Pylance {pylance} uses pyright 1.1.351"]


def test_invalid_pylance_version_is_rejected_before_fetch(fake_registry) -> None:
    with pytest.raises(InvalidVersionError):
        _resolver().resolve(None, "latest-stable")
    assert fake_registry.calls == []


def test_pylance_fetch_failure(fake_registry) -> None:
    url = PYLANCE_RELEASES_URL.format(version="2024.2.1")
    fake_registry.add_text(url, "404: Not Found", status_code=404)

    with pytest.raises(UpstreamFetchError) as excinfo:
        _resolver().resolve(None, "2024.2.1")

    assert url in str(excinfo.value)
    assert "404: Not Found" in str(excinfo.value)
    assert excinfo.value.status_code == 404


def test_pylance_transport_failure(fake_registry) -> None:
    url = PYLANCE_RELEASES_URL.format(version="latest-release")
    fake_registry.add_failure(url, requests.ConnectionError("network down"))

    with pytest.raises(UpstreamFetchError) as excinfo:
        _resolver().resolve(None, "latest-release")

    assert url in str(excinfo.value)
    assert "network down" in str(excinfo.value)
    assert excinfo.value.status_code is None


@pytest.mark.parametrize(
    "body",
    ['{"pyrightVersion": 1}', '{"version": "1.1.351"}', "[]", "<html>"],
)
def test_pylance_manifest_with_unexpected_shape(fake_registry, body: str) -> None:
    url = PYLANCE_RELEASES_URL.format(version="latest-release")
    fake_registry.add_text(url, body)

    with pytest.raises(ManifestParseError):
        _resolver().resolve(None, "latest-release")


def test_semver_precedence_orders_prereleases() -> None:
    assert parse_version("1.1.309-beta.2") < parse_version("1.1.309-beta.11")
    assert parse_version("1.1.309-beta.11") < parse_version("1.1.309")
    assert parse_version("1.1.308") < parse_version("1.1.309-alpha")


@pytest.mark.parametrize(
    ("raw", "dashed"),
    [
        ("1.1.200", True),
        ("1.1.308", True),
        ("1.1.309-rc.1", True),
        ("1.1.309", False),
        ("1.1.310", False),
        ("1.2.0", False),
    ],
)
def test_dashed_flag_cutoff(raw: str, dashed: bool) -> None:
    assert uses_dashed_flags(parse_version(raw)) is dashed


def test_normalize_version_returns_string() -> None:
    assert normalize_version("v2.0.0-rc.1+sha.abc") == "2.0.0-rc.1"
    assert isinstance(parse_version("2.0.0"), Version)
