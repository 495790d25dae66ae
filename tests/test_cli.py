from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from covreport import __version__
from covreport.cli import create_app

if TYPE_CHECKING:
    from pathlib import Path

    from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> None:
    # logging.basicConfig would bind a handler to the runner's temporary stderr
    monkeypatch.setattr("covreport.cli.root.configure_logging", lambda **_: None)
    for name in ("GITHUB_EVENT_NAME", "GITHUB_EVENT_PATH", "GITHUB_SHA", "GITHUB_REPOSITORY", "GITHUB_WORKSPACE"):
        monkeypatch.delenv(name, raising=False)


def _run(runner: CliRunner, args: list[str]) -> tuple[int, str]:
    """Invoke the CLI and return *(exit_code, output)* for convenience."""
    result = runner.invoke(create_app(), args)
    return result.exit_code, result.output


def test_version(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["--version"])
    assert code == 0
    assert out.strip() == f"covreport {__version__}"


def test_no_command_prints_help(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, [])
    assert code == 0
    assert "thresholds" in out
    assert "options" in out


def test_thresholds_json(cli_runner: CliRunner) -> None:
    code, out = _run(
        cli_runner,
        ["thresholds", "--no-env", "-I", "threshold-lines=80", "-I", "threshold-branches=75", "--format", "json"],
    )
    assert code == 0
    assert json.loads(out) == {"thresholds": {"lines": 80, "branches": 75}, "diagnostics": []}


def test_thresholds_reads_environment(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_THRESHOLD-FUNCTIONS", " 90 ")
    code, out = _run(cli_runner, ["thresholds", "--format", "json"])
    assert code == 0
    assert json.loads(out)["thresholds"] == {"functions": 90}


def test_explicit_input_overrides_environment(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("INPUT_THRESHOLD-LINES", "50")
    code, out = _run(cli_runner, ["thresholds", "-I", "threshold-lines=60", "--format", "json"])
    assert code == 0
    assert json.loads(out)["thresholds"] == {"lines": 60}


def test_thresholds_invalid_values_written_to_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    dest = tmp_path / "out" / "thresholds.json"
    code, _out = _run(
        cli_runner,
        [
            "thresholds",
            "--no-env",
            "-I",
            "threshold-lines=invalid",
            "-I",
            "threshold-statements=150",
            "--format",
            "json",
            "--output",
            str(dest),
        ],
    )
    assert code == 0
    data = json.loads(dest.read_text(encoding="utf-8"))
    assert data["thresholds"] == {}
    assert data["diagnostics"] == [
        'Invalid threshold-lines: "invalid" is not a valid number. Expected a number between 0 and 100.',
        "Invalid threshold-statements: 150 is out of range. Expected a value between 0 and 100.",
    ]


def test_thresholds_annotations(cli_runner: CliRunner, tmp_path: Path) -> None:
    dest = tmp_path / "thresholds.json"
    code, out = _run(
        cli_runner,
        ["thresholds", "--no-env", "--annotations", "-I", "threshold-lines=80.5", "--output", str(dest)],
    )
    assert code == 0
    lines = out.splitlines()
    assert lines[0].startswith("::warning::Coverage threshold validation issues found:%0A")
    assert lines[1] == (
        "No valid coverage thresholds found. Coverage report will be generated without threshold validation."
    )


def test_thresholds_strict_exit_code(cli_runner: CliRunner, tmp_path: Path) -> None:
    dest = tmp_path / "thresholds.json"
    args = ["thresholds", "--no-env", "--strict", "--output", str(dest)]
    code, _ = _run(cli_runner, [*args, "-I", "threshold-lines=101"])
    assert code == 78
    code, _ = _run(cli_runner, [*args, "-I", "threshold-lines=100"])
    assert code == 0


def test_thresholds_rejects_malformed_pair(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["thresholds", "--no-env", "-I", "threshold-lines"])
    assert code == 78
    assert "invalid input pair" in out


def test_thresholds_human_table(cli_runner: CliRunner) -> None:
    code, out = _run(
        cli_runner,
        ["thresholds", "--no-env", "-I", "threshold-lines=80", "--format", "human", "--no-color"],
    )
    assert code == 0
    assert "Coverage Thresholds" in out
    assert "threshold-lines" in out
    assert "80%" in out
    assert "unset" in out


def test_options_json(cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    event = tmp_path / "event.json"
    event.write_text(json.dumps({"pull_request": {"number": 4, "head": {"sha": "head"}}}), encoding="utf-8")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event))
    monkeypatch.setenv("GITHUB_SHA", "merge")
    monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path))

    dest = tmp_path / "options.json"
    code, _ = _run(
        cli_runner,
        [
            "options",
            "--no-env",
            "-I",
            f"working-directory={tmp_path}",
            "-I",
            "threshold-lines=85",
            "--format",
            "json",
            "--output",
            str(dest),
        ],
    )
    assert code == 0
    data = json.loads(dest.read_text(encoding="utf-8"))
    assert data["pr_number"] == 4
    assert data["commit_sha"] == "head"
    assert data["thresholds"] == {"lines": 85}
    assert data["comment_on"] == ["pr"]
    assert data["file_coverage_mode"] == "changes"
    assert data["file_coverage_root_path"] == str(tmp_path)
    assert data["json_summary_path"] == str((tmp_path / "coverage/coverage-summary.json").resolve())


def test_options_bad_event_payload(cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    event = tmp_path / "event.json"
    event.write_text("{broken", encoding="utf-8")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event))
    code, out = _run(cli_runner, ["options", "--no-env"])
    assert code == 65
    assert "ERROR: failed to read event payload" in out


def test_annotations_keep_json_stdout_clean(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        create_app(),
        ["thresholds", "--no-env", "--annotations", "--format", "json", "-I", "threshold-lines=abc"],
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["thresholds"] == {}
    assert data["diagnostics"] == [
        'Invalid threshold-lines: "abc" is not a valid number. Expected a number between 0 and 100.'
    ]
    assert result.stderr.startswith("::warning::Coverage threshold validation issues found:%0A")
    assert "No valid coverage thresholds found." in result.stderr


def test_annotations_stay_on_stdout_for_human_output(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        create_app(),
        ["thresholds", "--no-env", "--annotations", "--format", "human", "-I", "threshold-lines=abc"],
    )
    assert result.exit_code == 0
    assert result.stdout.startswith("::warning::")
    assert "Coverage Thresholds" in result.stdout


def test_blank_explicit_input_clears_environment_value(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("INPUT_THRESHOLD-LINES", "50")
    monkeypatch.setenv("INPUT_THRESHOLD-BRANCHES", "70")
    result = cli_runner.invoke(create_app(), ["thresholds", "-I", "threshold-lines=", "--format", "json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["thresholds"] == {"branches": 70}
