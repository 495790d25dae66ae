from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from covreport.inputs.github_context import payload_object

if TYPE_CHECKING:
    from covreport.inputs.github_context import GitHubContext
    from covreport.inputs.lookup import InputLookup
    from covreport.inputs.reporting import Reporter

PullRequestFinder: TypeAlias = Callable[["GitHubContext"], "int | None"]
"""Remote lookup for the PR behind a ``workflow_run`` (e.g. via the REST API)."""


def _positive_int(raw: str) -> int | None:
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    number = int(text)
    return number if number > 0 else None


def get_pull_request_number(
    lookup: InputLookup,
    context: GitHubContext,
    reporter: Reporter,
    *,
    find_pull_request: PullRequestFinder | None = None,
) -> int | None:
    """Determine which pull request the report should be commented on.

    An explicit ``pr-number`` input wins, then the event payload. For
    ``workflow_run`` events without linked PRs in the payload the remote
    *find_pull_request* collaborator is asked, when one is supplied.
    """
    from_input = _positive_int(lookup("pr-number"))
    if from_input is not None:
        reporter.info(f"Received pull-request number: {from_input}")
        return from_input

    pull_request = payload_object(context.payload.get("pull_request"))
    if pull_request.get("number"):
        number = int(pull_request["number"])
        reporter.info(f"Found pull-request number in the action's \"payload\": {number}")
        return number

    if context.is_workflow_run:
        linked = payload_object(context.payload.get("workflow_run")).get("pull_requests")
        first = payload_object(linked[0]) if isinstance(linked, list) and linked else {}
        if first.get("number"):
            number = int(first["number"])
            reporter.info(f"Found pull-request number in the action's \"payload\": {number}")
            return number
        if find_pull_request is not None:
            reporter.info(
                "Trying to get the triggering workflow in order to find the pull-request number "
                "to comment the results on..."
            )
            number = find_pull_request(context)
            if number is not None:
                return number

    reporter.info("No pull-request number found. Comment creation will be skipped!")
    return None


__all__ = ["PullRequestFinder", "get_pull_request_number"]
