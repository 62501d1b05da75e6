# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate :class:`ActionInputs` into a pyright command line."""

from __future__ import annotations

import shlex
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from semver import Version

from .config import ActionInputs
from .errors import MalformedArgsError
from .versioning import uses_dashed_flags

OptionValue = str | bool | None

_SHELL_OPERATOR_CHARS: Final[frozenset[str]] = frozenset("();<>|&")
_GLOB_CHARS: Final[frozenset[str]] = frozenset("*?[")


def _present(value: OptionValue) -> bool:
    return isinstance(value, str) and bool(value)


def _enabled(value: OptionValue) -> bool:
    return value is True


@dataclass(frozen=True, slots=True)
class FlagRule:
    """Map one input onto zero or more pyright arguments.

    ``flag`` is either the literal flag or a callable choosing the spelling
    from whether the dashed (pre-1.1.309) form is required.
    """

    option: str
    flag: str | Callable[[bool], str]
    predicate: Callable[[OptionValue], bool] = _present
    takes_value: bool = True

    def render(self, inputs: ActionInputs, *, dashed: bool) -> tuple[str, ...]:
        value: OptionValue = getattr(inputs, self.option)
        if not self.predicate(value):
            return ()
        flag = self.flag(dashed) if callable(self.flag) else self.flag
        if self.takes_value:
            return (flag, str(value))
        return (flag,)


def _spelled(dashed: str, undashed: str) -> Callable[[bool], str]:
    def choose(use_dashed: bool) -> str:
        return dashed if use_dashed else undashed

    return choose


FLAG_RULES: Final[tuple[FlagRule, ...]] = (
    FlagRule("create_stub", "--createstub"),
    FlagRule("dependencies", "--dependencies"),
    FlagRule("ignore_external", "--ignoreexternal", takes_value=False),
    FlagRule("level", "--level"),
    FlagRule("project", "--project"),
    FlagRule("python_platform", "--pythonplatform"),
    FlagRule("python_path", "--pythonpath"),
    FlagRule("python_version", "--pythonversion"),
    FlagRule("skip_unannotated", "--skipunannotated", _enabled, takes_value=False),
    FlagRule("stats", "--stats", _enabled, takes_value=False),
    FlagRule("typeshed_path", _spelled("--typeshed-path", "--typeshedpath")),
    FlagRule("venv_path", _spelled("--venv-path", "--venvpath")),
    FlagRule("verbose", "--lib", _enabled, takes_value=False),
    FlagRule("verify_types", "--verifytypes"),
    FlagRule("warnings", "--warnings", _enabled, takes_value=False),
    # Deprecated alias; may repeat --lib when verbose is also set.
    FlagRule("lib", "--lib", _enabled, takes_value=False),
)


def entry_point(artifact: Path) -> Path:
    """Return the script node runs for an unpacked pyright package."""

    return artifact / "package" / "index.js"


def _unquoted_characters(value: str) -> Iterator[tuple[str, bool]]:
    """Yield each character the shell would interpret, with whether it starts a word.

    Characters inside single or double quotes, or escaped by a backslash,
    are skipped.
    """

    quote: str | None = None
    escaped = False
    word_start = True
    for char in value:
        if escaped:
            escaped = False
        elif quote is not None:
            if char == quote:
                quote = None
            elif char == "\\" and quote == '"':
                escaped = True
        elif char == "\\":
            escaped = True
        elif char in "'\"":
            quote = char
        else:
            yield char, word_start
            word_start = char.isspace()
            continue
        word_start = False


def tokenize_extra_args(value: str) -> list[str]:
    """Split *value* into words using POSIX shell quoting rules.

    Only plain words are accepted; quoting makes any character literal.

    Raises:
        MalformedArgsError: On unbalanced quotes, a trailing escape, or an
            unquoted shell construct: an operator such as ``|`` or ``&&``, a
            glob character, or a ``#`` comment.
    """

    lexer = shlex.shlex(value, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        tokens = list(lexer)
    except ValueError as exc:
        raise MalformedArgsError(value) from exc
    for char, word_start in _unquoted_characters(value):
        if char in _SHELL_OPERATOR_CHARS or char in _GLOB_CHARS or (char == "#" and word_start):
            raise MalformedArgsError(value)
    return tokens


def build_args(inputs: ActionInputs, version: Version, artifact: Path) -> tuple[str, ...]:
    """Return the pyright argument vector for *inputs*.

    The first element is the package entry point; flags follow in the fixed
    order of :data:`FLAG_RULES`, then the words of ``extra-args``.
    """

    dashed = uses_dashed_flags(version)
    args: list[str] = [str(entry_point(artifact))]
    for rule in FLAG_RULES:
        args.extend(rule.render(inputs, dashed=dashed))
    if inputs.extra_args:
        args.extend(tokenize_extra_args(inputs.extra_args))
    return tuple(args)


__all__ = ["FLAG_RULES", "FlagRule", "build_args", "entry_point", "tokenize_extra_args"]
