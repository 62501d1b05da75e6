# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import io
import json
import tarfile
from collections.abc import Callable
from dataclasses import dataclass, field

import pytest


@dataclass
class FakeResponse:
    """Subset of ``requests.Response`` used by the fetch helpers."""

    status_code: int = 200
    content: bytes = b""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


@dataclass
class FakeRegistry:
    """Route ``requests.get`` calls to canned responses and record them."""

    routes: dict[str, FakeResponse] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    failures: dict[str, Exception] = field(default_factory=dict)

    def add_json(self, url: str, payload: object, *, status_code: int = 200) -> None:
        self.routes[url] = FakeResponse(status_code=status_code, content=json.dumps(payload).encode())

    def add_text(self, url: str, text: str, *, status_code: int = 200) -> None:
        self.routes[url] = FakeResponse(status_code=status_code, content=text.encode())

    def add_bytes(self, url: str, content: bytes) -> None:
        self.routes[url] = FakeResponse(content=content)

    def add_failure(self, url: str, exc: Exception) -> None:
        self.failures[url] = exc

    def get(self, url: str, **_kwargs: object) -> FakeResponse:
        self.calls.append(url)
        if url in self.failures:
            raise self.failures[url]
        return self.routes.get(url, FakeResponse(status_code=404, content=b"Not Found"))


@pytest.fixture
def fake_registry(monkeypatch: pytest.MonkeyPatch) -> FakeRegistry:
    """Replace HTTP access with an in-memory registry."""

    registry = FakeRegistry()
    monkeypatch.setattr("pyright_runner.fetch.requests.get", registry.get)
    return registry


def build_tarball(files: dict[str, str]) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for name, text in files.items():
            data = text.encode("utf-8")
            info = tarfile.TarInfo(name)
            info.size = len(data)
            archive.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


@pytest.fixture
def pyright_tarball() -> Callable[[], bytes]:
    """Return a factory producing a minimal pyright npm tarball."""

    def factory() -> bytes:
        return build_tarball(
            {
                "package/package.json": '{"name": "pyright"}',
                "package/index.js": "// entry point",
            }
        )

    return factory
