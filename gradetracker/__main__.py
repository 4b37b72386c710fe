"""CLI for the student grade tracker.

Usage:
    python -m gradetracker            # Run the demo transcript
    python -m gradetracker demo       # Same, explicitly
    python -m gradetracker summary    # Sample roster as a table
"""

from __future__ import annotations

import typer
from rich.console import Console

from gradetracker.reporter import demo_lines, render_roster
from gradetracker.roster import build_sample_roster

app = typer.Typer(
    name="gradetracker",
    help="Student grade tracker",
    invoke_without_command=True,
)
console = Console()


def _run_demo() -> None:
    # Plain echo keeps the transcript free of Rich markup
    for line in demo_lines():
        typer.echo(line)


@app.callback()
def main(ctx: typer.Context) -> None:
    """Run the demo when no command is given."""
    if ctx.invoked_subcommand is None:
        _run_demo()


@app.command("demo")
def cmd_demo() -> None:
    """Print the sample grade tracker transcript."""
    _run_demo()


@app.command("summary")
def cmd_summary() -> None:
    """Show the sample roster as a table."""
    render_roster(build_sample_roster(), console)


if __name__ == "__main__":
    app()
