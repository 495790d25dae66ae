from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from covreport.inputs.reporting import Reporter


class FileCoverageMode(StrEnum):
    """Which files get a per-file coverage table."""

    ALL = "all"
    CHANGES = "changes"
    NONE = "none"


def file_coverage_mode_from(raw: str, reporter: Reporter) -> FileCoverageMode:
    """Return the mode named by *raw*, falling back to ``changes`` with a warning."""
    try:
        return FileCoverageMode(raw.strip())
    except ValueError:
        reporter.warning(f'Not valid value "{raw}" for summary mode, used "changes"')
        return FileCoverageMode.CHANGES


__all__ = ["FileCoverageMode", "file_coverage_mode_from"]
