"""Action input handling: raw lookups in, validated options out."""

from __future__ import annotations

from covreport.inputs.comment_on import CommentOn, get_comment_on, parse_comment_on
from covreport.inputs.file_coverage_mode import FileCoverageMode, file_coverage_mode_from
from covreport.inputs.github_context import GitHubContext, get_commit_sha
from covreport.inputs.lookup import (
    ChainLookup,
    EnvironmentLookup,
    InputLookup,
    MappingLookup,
    parse_input_pairs,
)
from covreport.inputs.options import Options, read_options
from covreport.inputs.pull_request import PullRequestFinder, get_pull_request_number
from covreport.inputs.reporting import ActionsReporter, LoggingReporter, Reporter
from covreport.inputs.thresholds import (
    InvalidKind,
    ThresholdProperty,
    ThresholdResolution,
    ThresholdResolver,
    Thresholds,
    parse_thresholds,
    validate_threshold_value,
)

__all__ = [
    "ActionsReporter",
    "ChainLookup",
    "CommentOn",
    "EnvironmentLookup",
    "FileCoverageMode",
    "GitHubContext",
    "InputLookup",
    "InvalidKind",
    "LoggingReporter",
    "MappingLookup",
    "Options",
    "PullRequestFinder",
    "Reporter",
    "ThresholdProperty",
    "ThresholdResolution",
    "ThresholdResolver",
    "Thresholds",
    "file_coverage_mode_from",
    "get_comment_on",
    "get_commit_sha",
    "get_pull_request_number",
    "parse_comment_on",
    "parse_input_pairs",
    "parse_thresholds",
    "read_options",
    "validate_threshold_value",
]
