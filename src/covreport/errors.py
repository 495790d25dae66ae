"""Centralised exception hierarchy for covreport."""

from __future__ import annotations


class CovreportError(Exception):
    """Base class for all custom covreport exceptions."""


class InputError(CovreportError):
    """Base class for errors related to action input handling."""


class InputSyntaxError(InputError):
    """A ``KEY=VALUE`` input pair could not be parsed."""


class EventPayloadError(CovreportError):
    """The workflow event payload exists but could not be read as JSON."""


__all__ = [
    "CovreportError",
    "EventPayloadError",
    "InputError",
    "InputSyntaxError",
]
