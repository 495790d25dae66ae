"""Channels used to surface input diagnostics to the user."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Protocol

from covreport import logger as _package_logger

if TYPE_CHECKING:
    from typing import TextIO


class Reporter(Protocol):
    """Sink for warning- and info-level diagnostics."""

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...


class LoggingReporter:
    """Forward diagnostics to a stdlib logger (the package logger by default)."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _package_logger

    def warning(self, message: str) -> None:
        self._logger.warning("%s", message)

    def info(self, message: str) -> None:
        self._logger.info("%s", message)


def escape_command_data(message: str) -> str:
    """Escape *message* for use as workflow command data."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsReporter:
    """Emit diagnostics as GitHub Actions workflow commands.

    Warnings become ``::warning::`` annotations; info lines are written as-is.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")

    def warning(self, message: str) -> None:
        self._write(f"::warning::{escape_command_data(message)}")

    def info(self, message: str) -> None:
        self._write(message)


__all__ = ["ActionsReporter", "LoggingReporter", "Reporter", "escape_command_data"]
