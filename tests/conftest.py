from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import pytest
from typer.testing import CliRunner

from covreport.inputs.lookup import MappingLookup


@dataclass
class RecordingReporter:
    """Reporter that keeps every message for later assertions."""

    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def info(self, message: str) -> None:
        self.infos.append(message)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def lookup_from() -> Callable[..., MappingLookup]:
    """Build a lookup from short threshold names, e.g. ``lines="80"``."""

    def build(values: Mapping[str, str] | None = None, **thresholds: str) -> MappingLookup:
        merged = dict(values or {})
        merged.update({f"threshold-{name}": raw for name, raw in thresholds.items()})
        return MappingLookup(merged)

    return build


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def reporter_factory() -> type[RecordingReporter]:
    return RecordingReporter
