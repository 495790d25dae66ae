"""Central configuration and constants for ``covreport``."""

from __future__ import annotations

import logging

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Inclusive bounds for coverage threshold percentages.
THRESHOLD_MIN = 0
THRESHOLD_MAX = 100

# Prefix used by GitHub Actions when exposing `with:` inputs to the process.
INPUT_ENV_PREFIX = "INPUT_"

# Input defaults as declared in the action metadata. The runner fills these in
# before the process starts; the CLI layers them under explicit values.
ACTION_INPUT_DEFAULTS: dict[str, str] = {
    "working-directory": "./",
    "json-summary-path": "coverage/coverage-summary.json",
    "json-final-path": "coverage/coverage-final.json",
    "json-summary-compare-path": "",
    "name": "",
    "file-coverage-mode": "changes",
    "file-coverage-root-path": "",
    "comment-on": "pr",
    "pr-number": "auto",
}


def configure_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = [
    "ACTION_INPUT_DEFAULTS",
    "INPUT_ENV_PREFIX",
    "LOG_FORMAT",
    "THRESHOLD_MAX",
    "THRESHOLD_MIN",
    "configure_logging",
]
