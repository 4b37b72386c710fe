"""End-to-end tests for the roster, the transcript and the CLI."""

import pytest
from typer.testing import CliRunner

from gradetracker.__main__ import app
from gradetracker.reporter import BANNER, demo_lines
from gradetracker.roster import SAMPLE_ROSTER, build_sample_roster

EXPECTED = [
    "=== Student Grade Tracker ===",
    "Created students successfully",
    "Adding scores for Alice...",
    "Adding scores for Bob...",
    "Student: Alice, Age: 20",
    "Average score: 91.60",
    "Student: Bob, Age: 21",
    "Average score: 80.25",
]

runner = CliRunner()


def test_sample_roster_counts():
    records = build_sample_roster()
    assert [r.name for r in records] == ["Alice", "Bob"]
    assert [r.count for r in records] == [len(s) for _, _, s in SAMPLE_ROSTER]
    assert records[0].average() == pytest.approx(91.6)
    assert records[1].average() == pytest.approx(80.25)


def test_progress_messages():
    messages = []
    build_sample_roster(on_progress=messages.append)
    assert messages == [
        "Created students successfully",
        "Adding scores for Alice...",
        "Adding scores for Bob...",
    ]


def test_demo_lines():
    lines = demo_lines()
    assert lines[0] == BANNER
    assert lines == EXPECTED


def test_no_args_runs_demo():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert result.output.splitlines() == EXPECTED


def test_demo_command():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert result.output.splitlines() == EXPECTED


def test_summary_command():
    result = runner.invoke(app, ["summary"])
    assert result.exit_code == 0
    assert "Grade Tracker" in result.output
    assert "Alice" in result.output
    assert "Bob" in result.output
    assert "91.60" in result.output
    assert "80.25" in result.output


def test_render_empty_roster():
    from rich.console import Console

    from gradetracker.reporter import render_roster

    console = Console(record=True, width=80)
    render_roster([], console)
    assert "No students in roster." in console.export_text()
