from __future__ import annotations

from covreport.cli.root import cli, create_app, main

__all__ = ["cli", "create_app", "main"]
