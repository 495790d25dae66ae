"""Workflow run context as exposed by the GitHub Actions runner."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from covreport import logger
from covreport.errors import EventPayloadError

if TYPE_CHECKING:
    from collections.abc import Mapping

PULL_REQUEST_EVENTS = frozenset({"pull_request", "pull_request_target"})
WORKFLOW_RUN_EVENT = "workflow_run"


@dataclass(frozen=True, slots=True)
class GitHubContext:
    """The subset of the workflow context that input resolution needs."""

    event_name: str = ""
    sha: str = ""
    repository: str = ""
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitHubContext:
        env = os.environ if environ is None else environ
        return cls(
            event_name=env.get("GITHUB_EVENT_NAME", ""),
            sha=env.get("GITHUB_SHA", ""),
            repository=env.get("GITHUB_REPOSITORY", ""),
            payload=load_event_payload(env.get("GITHUB_EVENT_PATH")),
        )

    @property
    def is_pull_request(self) -> bool:
        return self.event_name in PULL_REQUEST_EVENTS

    @property
    def is_workflow_run(self) -> bool:
        return self.event_name == WORKFLOW_RUN_EVENT


def load_event_payload(path: str | None) -> dict[str, Any]:
    """Return the JSON event payload at *path*, or ``{}`` if there is none."""
    if not path:
        return {}
    event_path = Path(path)
    if not event_path.exists():
        logger.debug("event payload %s does not exist", event_path)
        return {}
    try:
        data = json.loads(event_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeError, json.JSONDecodeError) as exc:
        msg = f"failed to read event payload {event_path}: {exc}"
        raise EventPayloadError(msg) from exc
    if not isinstance(data, dict):
        msg = f"event payload {event_path} is not a JSON object"
        raise EventPayloadError(msg)
    return data


def payload_object(value: Any) -> dict[str, Any]:
    """Return *value* if it is a JSON object, else an empty one (for ``null`` and friends)."""
    return value if isinstance(value, dict) else {}


def get_commit_sha(context: GitHubContext) -> str:
    """Return the SHA of the commit the coverage was produced for.

    Pull-request events report the PR head, and ``workflow_run`` events the
    head commit of the triggering run, rather than the merge/base SHA.
    """
    if context.is_pull_request:
        pull_request = payload_object(context.payload.get("pull_request"))
        return str(payload_object(pull_request.get("head")).get("sha") or context.sha)
    if context.is_workflow_run:
        workflow_run = payload_object(context.payload.get("workflow_run"))
        return str(payload_object(workflow_run.get("head_commit")).get("id") or context.sha)
    return context.sha


__all__ = [
    "PULL_REQUEST_EVENTS",
    "WORKFLOW_RUN_EVENT",
    "GitHubContext",
    "get_commit_sha",
    "load_event_payload",
    "payload_object",
]
