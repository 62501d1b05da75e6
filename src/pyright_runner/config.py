# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Input model and loaders for a pyright run."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .github import get_input


def interpret_flag(value: object) -> bool | None:
    """Normalise a stringly-typed boolean input.

    Empty or missing values are ``None``; ``"TRUE"`` in any case is ``True``;
    every other value, ``"FALSE"`` and ``"yes"`` included, is ``False``.
    """

    if value is None or isinstance(value, bool):
        return value
    text = str(value).strip()
    if not text:
        return None
    return text.upper() == "TRUE"


class ActionInputs(BaseModel):
    """Immutable view of every input recognised by the runner."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    version: str = ""
    pylance_version: str = Field(default="", alias="pylance-version")
    working_directory: str = Field(default="", alias="working-directory")
    annotate: str = ""
    no_comments: bool | None = Field(default=None, alias="no-comments")

    create_stub: str = Field(default="", alias="create-stub")
    dependencies: str = ""
    ignore_external: str = Field(default="", alias="ignore-external")
    level: str = ""
    project: str = ""
    python_platform: str = Field(default="", alias="python-platform")
    python_path: str = Field(default="", alias="python-path")
    python_version: str = Field(default="", alias="python-version")
    skip_unannotated: bool | None = Field(default=None, alias="skip-unannotated")
    stats: bool | None = None
    typeshed_path: str = Field(default="", alias="typeshed-path")
    venv_path: str = Field(default="", alias="venv-path")
    verbose: bool | None = None
    verify_types: str = Field(default="", alias="verify-types")
    warnings: bool | None = None
    lib: bool | None = None
    extra_args: str = Field(default="", alias="extra-args")

    @field_validator("no_comments", "skip_unannotated", "stats", "verbose", "warnings", "lib", mode="before")
    @classmethod
    def _normalise_flag(cls, value: object) -> bool | None:
        return interpret_flag(value)

    @field_validator("*", mode="before")
    @classmethod
    def _strip_text(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


INPUT_NAMES: Final[tuple[str, ...]] = tuple(
    field.alias or name for name, field in ActionInputs.model_fields.items()
)


def parse_overrides(entries: Iterable[str]) -> dict[str, str]:
    """Split ``name=value`` CLI overrides into a mapping.

    Raises:
        ConfigError: If an entry lacks ``=`` or names an unknown input.
    """

    overrides: dict[str, str] = {}
    for entry in entries:
        name, sep, value = entry.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ConfigError(f"invalid input override {entry!r}; expected name=value")
        if name not in INPUT_NAMES:
            raise ConfigError(f"unknown input {name!r}")
        overrides[name] = value
    return overrides


def load_inputs(
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, str] | None = None,
) -> ActionInputs:
    """Build :class:`ActionInputs` from ``INPUT_*`` variables and CLI overrides."""

    raw: dict[str, str] = {name: get_input(name, environ) for name in INPUT_NAMES}
    if overrides:
        raw.update(overrides)
    try:
        return ActionInputs.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid inputs: {exc}") from exc


__all__ = ["ActionInputs", "INPUT_NAMES", "interpret_flag", "load_inputs", "parse_overrides"]
