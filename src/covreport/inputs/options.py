"""Assembly of the fully resolved action options."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from covreport import logger
from covreport.inputs.comment_on import CommentOn, get_comment_on
from covreport.inputs.file_coverage_mode import FileCoverageMode, file_coverage_mode_from
from covreport.inputs.github_context import GitHubContext, get_commit_sha
from covreport.inputs.pull_request import get_pull_request_number
from covreport.inputs.thresholds import Thresholds, ThresholdResolver

if TYPE_CHECKING:
    from covreport.inputs.lookup import InputLookup
    from covreport.inputs.pull_request import PullRequestFinder
    from covreport.inputs.reporting import Reporter


@dataclass(frozen=True, slots=True)
class Options:
    """Validated inputs consumed by the coverage reporting steps."""

    file_coverage_mode: FileCoverageMode
    json_final_path: Path
    json_summary_path: Path
    json_summary_compare_path: Path | None
    name: str
    thresholds: Thresholds
    working_directory: str
    pr_number: int | None
    commit_sha: str
    comment_on: list[CommentOn] = field(default_factory=list)
    file_coverage_root_path: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "file_coverage_mode": self.file_coverage_mode.value,
            "json_final_path": str(self.json_final_path),
            "json_summary_path": str(self.json_summary_path),
            "json_summary_compare_path": (
                str(self.json_summary_compare_path) if self.json_summary_compare_path else None
            ),
            "name": self.name,
            "thresholds": self.thresholds.to_dict(),
            "working_directory": self.working_directory,
            "pr_number": self.pr_number,
            "commit_sha": self.commit_sha,
            "comment_on": [target.value for target in self.comment_on],
            "file_coverage_root_path": self.file_coverage_root_path,
        }


def resolve_input_path(working_directory: str, raw: str) -> Path:
    """Resolve *raw* against *working_directory*; absolute inputs are kept."""
    return (Path(working_directory) / raw).resolve()


def read_options(
    lookup: InputLookup,
    *,
    reporter: Reporter,
    context: GitHubContext | None = None,
    find_pull_request: PullRequestFinder | None = None,
) -> Options:
    """Read and validate every action input.

    The pull-request number is only looked up when ``comment-on`` includes
    ``pr``; otherwise it stays ``None``.
    """
    context = context or GitHubContext()
    working_directory = lookup("working-directory")

    file_coverage_mode = file_coverage_mode_from(lookup("file-coverage-mode"), reporter)
    json_summary_path = resolve_input_path(working_directory, lookup("json-summary-path"))
    json_final_path = resolve_input_path(working_directory, lookup("json-final-path"))

    compare_input = lookup("json-summary-compare-path")
    json_summary_compare_path = (
        resolve_input_path(working_directory, compare_input) if compare_input.strip() else None
    )

    comment_on = get_comment_on(lookup, reporter)
    thresholds = ThresholdResolver(reporter).resolve(lookup)
    commit_sha = get_commit_sha(context)

    pr_number: int | None = None
    if CommentOn.PR in comment_on:
        pr_number = get_pull_request_number(
            lookup, context, reporter, find_pull_request=find_pull_request
        )

    logger.debug("resolved working directory %r, commit %s", working_directory, commit_sha or "<unknown>")

    return Options(
        file_coverage_mode=file_coverage_mode,
        json_final_path=json_final_path,
        json_summary_path=json_summary_path,
        json_summary_compare_path=json_summary_compare_path,
        name=lookup("name"),
        thresholds=thresholds,
        working_directory=working_directory,
        pr_number=pr_number,
        commit_sha=commit_sha,
        comment_on=comment_on,
        file_coverage_root_path=lookup("file-coverage-root-path"),
    )


__all__ = ["Options", "read_options", "resolve_input_path"]
