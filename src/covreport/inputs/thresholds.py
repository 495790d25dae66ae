"""Coverage threshold parsing and validation for action inputs.

Each of the four threshold inputs is validated on its own. Invalid values are
never fatal: they are collected into one ordered batch of diagnostics,
reported once, and the affected metric is simply left unconstrained.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import TYPE_CHECKING

from covreport.config import THRESHOLD_MAX, THRESHOLD_MIN

if TYPE_CHECKING:
    from covreport.inputs.lookup import InputLookup
    from covreport.inputs.reporting import Reporter

WARNING_HEADER = "Coverage threshold validation issues found:"
WARNING_FOOTER = "Invalid thresholds will be ignored. Only valid thresholds will be applied."
NO_VALID_THRESHOLDS_INFO = (
    "No valid coverage thresholds found. Coverage report will be generated without threshold validation."
)

# Out-of-range values with a larger exponent are shown in scientific notation.
_MAX_EXPANDED_DIGITS = 20


class ThresholdProperty(StrEnum):
    """Coverage metrics that accept a threshold, in evaluation order."""

    LINES = "lines"
    STATEMENTS = "statements"
    FUNCTIONS = "functions"
    BRANCHES = "branches"

    @property
    def input_name(self) -> str:
        return f"threshold-{self.value}"


class InvalidKind(StrEnum):
    """Reasons a non-blank threshold input can be rejected."""

    NOT_A_NUMBER = "not-a-number"
    NOT_AN_INTEGER = "not-an-integer"
    OUT_OF_RANGE = "out-of-range"


@dataclass(frozen=True, slots=True)
class Thresholds:
    """Validated thresholds; ``None`` means the metric is unconstrained."""

    lines: int | None = None
    statements: int | None = None
    functions: int | None = None
    branches: int | None = None

    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> dict[str, int]:
        """Return the sparse mapping of configured metrics."""
        return {
            prop.value: value
            for prop in ThresholdProperty
            if (value := getattr(self, prop.value)) is not None
        }


@dataclass(frozen=True, slots=True)
class Valid:
    """Accepted input; *value* is ``None`` when the input was blank."""

    value: int | None = None


@dataclass(frozen=True, slots=True)
class Invalid:
    """Rejected input with its diagnostics."""

    kind: InvalidKind
    reasons: tuple[str, ...]


ValidationResult = Valid | Invalid


@dataclass(frozen=True, slots=True)
class ThresholdResolution:
    """Everything learned from one pass over the threshold inputs."""

    thresholds: Thresholds
    diagnostics: tuple[str, ...] = ()
    any_input: bool = False
    invalid: dict[ThresholdProperty, InvalidKind] = field(default_factory=dict)

    @property
    def warning_message(self) -> str | None:
        """Combined warning text, or ``None`` when nothing was rejected."""
        if not self.diagnostics:
            return None
        bullets = "\n".join(f"  - {diagnostic}" for diagnostic in self.diagnostics)
        return f"{WARNING_HEADER}\n{bullets}\n\n{WARNING_FOOTER}"

    @property
    def info_message(self) -> str | None:
        """Info text when inputs were given but none of them was usable."""
        if self.any_input and self.thresholds.is_empty():
            return NO_VALID_THRESHOLDS_INFO
        return None


def validate_threshold_value(raw: str, name: str) -> ValidationResult:
    """Validate one raw threshold input.

    Checks run in order (number, integer, range) and stop at the first
    failure, so a rejected input carries exactly one diagnostic.
    """
    text = raw.strip()
    if not text:
        return Valid()

    number = _to_decimal(text)
    if number is None:
        msg = f'Invalid {name}: "{raw}" is not a valid number. Expected a number between 0 and 100.'
        return Invalid(InvalidKind.NOT_A_NUMBER, (msg,))

    if not number.is_finite() or number != number.to_integral_value():
        msg = f'Invalid {name}: "{raw}" is not an integer. Expected an integer between 0 and 100.'
        return Invalid(InvalidKind.NOT_AN_INTEGER, (msg,))

    if number < THRESHOLD_MIN or number > THRESHOLD_MAX:
        shown = _format_integer(number)
        msg = f"Invalid {name}: {shown} is out of range. Expected a value between 0 and 100."
        return Invalid(InvalidKind.OUT_OF_RANGE, (msg,))

    return Valid(int(number))


def _to_decimal(text: str) -> Decimal | None:
    # Decimal also accepts digit separators, non-ASCII digits, NaN and
    # spellings such as "inf"; only "Infinity" counts as a (non-integer) number.
    if "_" in text or not text.isascii():
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if number.is_nan():
        return None
    if number.is_infinite() and text.lstrip("+-") != "Infinity":
        return None
    return number


def _format_integer(number: Decimal) -> str:
    if number.adjusted() > _MAX_EXPANDED_DIGITS:
        return f"{number.normalize():e}"
    return str(int(number))


class ThresholdResolver:
    """Resolve the ``threshold-*`` inputs into :class:`Thresholds`."""

    def __init__(self, reporter: Reporter) -> None:
        self._reporter = reporter

    def evaluate(self, lookup: InputLookup) -> ThresholdResolution:
        """Validate all threshold inputs without reporting anything."""
        values: dict[str, int] = {}
        diagnostics: list[str] = []
        invalid: dict[ThresholdProperty, InvalidKind] = {}

        for prop in ThresholdProperty:
            result = validate_threshold_value(lookup(prop.input_name), prop.input_name)
            if isinstance(result, Invalid):
                diagnostics.extend(result.reasons)
                invalid[prop] = result.kind
            elif result.value is not None:
                values[prop.value] = result.value

        any_input = any(lookup(prop.input_name).strip() for prop in ThresholdProperty)

        return ThresholdResolution(
            thresholds=Thresholds(**values),
            diagnostics=tuple(diagnostics),
            any_input=any_input,
            invalid=invalid,
        )

    def report(self, resolution: ThresholdResolution) -> None:
        """Send the warning and info messages of *resolution*, if any."""
        warning = resolution.warning_message
        if warning is not None:
            self._reporter.warning(warning)
        info = resolution.info_message
        if info is not None:
            self._reporter.info(info)

    def resolve(self, lookup: InputLookup) -> Thresholds:
        resolution = self.evaluate(lookup)
        self.report(resolution)
        return resolution.thresholds


def parse_thresholds(lookup: InputLookup, reporter: Reporter) -> Thresholds:
    """Resolve thresholds from *lookup*, reporting problems to *reporter*."""
    return ThresholdResolver(reporter).resolve(lookup)


__all__ = [
    "NO_VALID_THRESHOLDS_INFO",
    "WARNING_FOOTER",
    "WARNING_HEADER",
    "Invalid",
    "InvalidKind",
    "ThresholdProperty",
    "ThresholdResolution",
    "ThresholdResolver",
    "Thresholds",
    "Valid",
    "ValidationResult",
    "parse_thresholds",
    "validate_threshold_value",
]
