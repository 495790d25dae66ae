"""Sources of raw action input strings.

Every lookup is a plain callable ``name -> str``. A missing input resolves to
the empty string, so consumers never have to distinguish "unset" from
"blank".
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol

from covreport.config import INPUT_ENV_PREFIX
from covreport.errors import InputSyntaxError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class InputLookup(Protocol):
    """Anything that maps an input name to its raw string value."""

    def __call__(self, name: str) -> str: ...


def input_env_var(name: str) -> str:
    """Return the environment variable GitHub Actions uses for input *name*."""
    return f"{INPUT_ENV_PREFIX}{name.replace(' ', '_').upper()}"


class EnvironmentLookup:
    """Read inputs from ``INPUT_*`` environment variables.

    Values are trimmed by default, mirroring ``@actions/core.getInput``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None, *, trim: bool = True) -> None:
        self._environ = os.environ if environ is None else environ
        self._trim = trim

    def __call__(self, name: str) -> str:
        value = self._environ.get(input_env_var(name), "")
        return value.strip() if self._trim else value


class MappingLookup:
    """Read inputs from an in-memory mapping keyed by input name.

    Keys present in the mapping win even when blank; other names are passed
    to *fallback* when one is given.
    """

    def __init__(self, values: Mapping[str, str], *, fallback: InputLookup | None = None) -> None:
        self._values = dict(values)
        self._fallback = fallback

    def __call__(self, name: str) -> str:
        if name in self._values:
            return self._values[name]
        return self._fallback(name) if self._fallback is not None else ""


class ChainLookup:
    """Return the first non-blank answer from several lookups."""

    def __init__(self, *lookups: InputLookup) -> None:
        self._lookups = lookups

    def __call__(self, name: str) -> str:
        for lookup in self._lookups:
            value = lookup(name)
            if value.strip():
                return value
        return ""


def parse_input_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a mapping; later keys win."""
    values: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            msg = f"invalid input pair {pair!r}: expected KEY=VALUE"
            raise InputSyntaxError(msg)
        values[key] = value
    return values


__all__ = [
    "ChainLookup",
    "EnvironmentLookup",
    "InputLookup",
    "MappingLookup",
    "input_env_var",
    "parse_input_pairs",
]
