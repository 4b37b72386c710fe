"""Sample roster used by the demo.

Each entry is (name, age, scores). Scores are appended in the order given.
"""

from __future__ import annotations

from typing import Callable, Optional

from gradetracker.models import StudentRecord

SAMPLE_ROSTER: list[tuple[str, int, tuple[float, ...]]] = [
    ("Alice", 20, (95.5, 87.0, 92.3)),
    ("Bob", 21, (78.5, 82.0)),
]


def build_sample_roster(
    on_progress: Optional[Callable[[str], None]] = None,
) -> list[StudentRecord]:
    """Create every sample student, then append their scores.

    Args:
        on_progress: Called with a status message after the records are
            created and before each student's scores are added.

    Returns:
        Records in roster order.
    """
    emit = on_progress or (lambda _msg: None)

    records = [StudentRecord.create(name, age) for name, age, _ in SAMPLE_ROSTER]
    emit("Created students successfully")

    for record, (_, _, scores) in zip(records, SAMPLE_ROSTER):
        emit(f"Adding scores for {record.name}...")
        for score in scores:
            record.append_score(score)

    return records
