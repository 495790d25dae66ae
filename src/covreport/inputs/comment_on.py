"""Parsing of the ``comment-on`` input."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from covreport.inputs.lookup import InputLookup
    from covreport.inputs.reporting import Reporter

_NONE = "none"


class CommentOn(StrEnum):
    """Places the coverage report can be posted to."""

    PR = "pr"
    COMMIT = "commit"


def parse_comment_on(raw: str, reporter: Reporter) -> list[CommentOn]:
    """Split a comma separated target list, dropping unknown entries.

    ``none`` contributes no target, so ``"none"`` alone disables commenting.
    Unknown entries are reported once each; blank entries and repeats are
    skipped silently.
    """
    targets: list[CommentOn] = []
    for item in (part.strip() for part in raw.split(",")):
        if not item or item == _NONE:
            continue
        try:
            target = CommentOn(item)
        except ValueError:
            reporter.warning(
                f'Invalid value "{item}" for "comment-on". Valid values are "pr", "commit" and "none".'
            )
            continue
        if target not in targets:
            targets.append(target)
    return targets


def get_comment_on(lookup: InputLookup, reporter: Reporter) -> list[CommentOn]:
    return parse_comment_on(lookup("comment-on"), reporter)


__all__ = ["CommentOn", "get_comment_on", "parse_comment_on"]
