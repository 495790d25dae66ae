"""Text renderings of resolved inputs."""

from __future__ import annotations

import json
from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from covreport.inputs.thresholds import ThresholdProperty

if TYPE_CHECKING:
    from covreport.inputs.options import Options
    from covreport.inputs.thresholds import ThresholdResolution


def _to_text(table: Table, *, color: bool) -> str:
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=100)
    console.print(table)
    return buf.getvalue().rstrip()


def render_thresholds(resolution: ThresholdResolution, *, fmt: str, color: bool = False) -> str:
    """Render thresholds as JSON or as a Rich table with one row per metric."""
    if fmt == "json":
        payload = {
            "thresholds": resolution.thresholds.to_dict(),
            "diagnostics": list(resolution.diagnostics),
        }
        return json.dumps(payload, indent=2, sort_keys=True)

    table = Table(title="Coverage Thresholds", box=box.SIMPLE_HEAVY, header_style="bold")
    table.add_column("Metric")
    table.add_column("Input")
    table.add_column("Threshold", justify="right")

    for prop in ThresholdProperty:
        value = getattr(resolution.thresholds, prop.value)
        if prop in resolution.invalid:
            cell = f"[red]invalid ({resolution.invalid[prop].value})[/red]"
        elif value is None:
            cell = "[dim]unset[/dim]"
        else:
            cell = f"[green]{value}%[/green]"
        table.add_row(prop.value, prop.input_name, cell)
    return _to_text(table, color=color)


def render_options(options: Options, *, fmt: str, color: bool = False) -> str:
    """Render the resolved options as JSON or as a two-column Rich table."""
    data = options.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, sort_keys=True)

    table = Table(title="Resolved Options", box=box.SIMPLE_HEAVY, header_style="bold")
    table.add_column("Option")
    table.add_column("Value", overflow="fold")
    for key, value in data.items():
        if isinstance(value, dict):
            text = ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
        elif isinstance(value, list):
            text = ", ".join(str(v) for v in value) or "-"
        else:
            text = "-" if value in {None, ""} else str(value)
        table.add_row(key, text)
    return _to_text(table, color=color)


__all__ = ["render_options", "render_thresholds"]
