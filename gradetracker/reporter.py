"""Grade tracker output: the demo transcript and a Rich roster table."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from gradetracker.models import StudentRecord
from gradetracker.roster import build_sample_roster

BANNER = "=== Student Grade Tracker ==="


def demo_lines() -> list[str]:
    """Build the sample roster and return the full demo transcript."""
    lines = [BANNER]
    records = build_sample_roster(on_progress=lines.append)
    for record in records:
        lines.extend(record.report().splitlines())
    return lines


def _fmt_scores(scores: list[float]) -> str:
    """Format scores as a comma-separated list."""
    if not scores:
        return "--"
    return ", ".join(f"{s:g}" for s in scores)


def render_roster(records: list[StudentRecord], console: Console) -> None:
    """Render a Rich table with one row per student."""
    if not records:
        console.print("[yellow]No students in roster.[/yellow]")
        return

    table = Table(title="Grade Tracker", show_header=True, header_style="bold")
    table.add_column("Student", style="green", min_width=10)
    table.add_column("Age", justify="right")
    table.add_column("Scores", min_width=20)
    table.add_column("Count", justify="right")
    table.add_column("Average", justify="right")

    for record in records:
        d = record.to_dict()
        table.add_row(
            d["name"],
            str(d["age"]),
            _fmt_scores(d["scores"]),
            str(d["count"]),
            f"{d['average']:.2f}",
        )

    console.print()
    console.print(table)
    console.print()
