# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thin HTTP helpers shared by the version resolver and artifact provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import requests

from .errors import UpstreamFetchError

DEFAULT_TIMEOUT: Final[float] = 60.0
HTTP_OK: Final[int] = 200


@dataclass(frozen=True, slots=True)
class FetchSettings:
    """Request options applied to every upstream call."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = "pyright-runner"

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}


@dataclass(frozen=True, slots=True)
class FetchedBody:
    """Response body paired with the URL it was read from."""

    url: str
    text: str


def _get(url: str, *, settings: FetchSettings, failure: str) -> requests.Response:
    try:
        return requests.get(url, timeout=settings.timeout, headers=settings.headers)
    except requests.RequestException as exc:
        raise UpstreamFetchError(f"{failure} from {url} -- {exc}", url=url) from exc


def fetch_text(url: str, *, settings: FetchSettings, failure: str) -> FetchedBody:
    """Return the body at *url*, raising :class:`UpstreamFetchError` unless HTTP 200.

    Args:
        url: Absolute URL to request.
        settings: Timeout and header configuration.
        failure: Human-readable prefix for the error message, e.g.
            ``"Failed to download metadata for pyright 1.1.350"``.

    Returns:
        FetchedBody: Decoded response body.

    Raises:
        UpstreamFetchError: On a non-200 status or a transport failure such
            as a refused connection or timeout.
    """

    response = _get(url, settings=settings, failure=failure)
    body = response.text
    if response.status_code != HTTP_OK:
        raise UpstreamFetchError(f"{failure} from {url} -- {body}", url=url, status_code=response.status_code)
    return FetchedBody(url=url, text=body)


def fetch_bytes(url: str, *, settings: FetchSettings, failure: str) -> bytes:
    """Return the raw payload at *url*; used for release tarballs."""

    response = _get(url, settings=settings, failure=failure)
    if response.status_code != HTTP_OK:
        raise UpstreamFetchError(
            f"{failure} from {url} -- HTTP {response.status_code}",
            url=url,
            status_code=response.status_code,
        )
    return response.content


__all__ = ["DEFAULT_TIMEOUT", "FetchSettings", "FetchedBody", "fetch_bytes", "fetch_text"]
