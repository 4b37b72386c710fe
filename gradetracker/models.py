"""Data models for the grade tracker.

StudentRecord holds one student's name, age and the scores appended so far.
The name and age are fixed at creation; only the score list grows.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class StudentRecord:
    """A single student and their test scores.

    Records compare and hash by identity. The score list is created empty
    for each record and is not a constructor argument.
    """

    name: str
    age: int
    scores: list[float] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"name must be a str, got {type(self.name).__name__}")
        # bool is an int subclass
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise TypeError(f"age must be an int, got {type(self.age).__name__}")

    @classmethod
    def create(cls, name: str, age: int) -> StudentRecord:
        """Create a record with an empty score list.

        Raises:
            TypeError: if name is not a str or age is not an int.
        """
        return cls(name=name, age=age)

    @property
    def count(self) -> int:
        return len(self.scores)

    def append_score(self, score: float) -> None:
        """Append one score to the end of the list.

        Raises:
            TypeError: if score is a bool, a str, or not convertible to float.
            ValueError: if score is NaN or infinite.
        """
        if isinstance(score, (bool, str)):
            raise TypeError(f"score must be a number, got {type(score).__name__}")
        # Convert first so a bad value leaves the list untouched
        value = float(score)
        if not math.isfinite(value):
            raise ValueError(f"score must be finite, got {value}")
        self.scores.append(value)

    def average(self) -> float:
        """Arithmetic mean of the stored scores, 0.0 when there are none."""
        if not self.scores:
            return 0.0
        return sum(self.scores) / len(self.scores)

    def report(self) -> str:
        """Two-line summary: name/age, then the average to two decimals."""
        return (
            f"Student: {self.name}, Age: {self.age}\n"
            f"Average score: {self.average():.2f}"
        )

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "age": self.age,
            "scores": list(self.scores),
            "count": self.count,
            "average": self.average(),
        }


def create(name: str, age: int) -> StudentRecord:
    return StudentRecord.create(name, age)


def append_score(record: StudentRecord, score: float) -> None:
    record.append_score(score)


def average(record: StudentRecord) -> float:
    return record.average()


def report(record: StudentRecord) -> str:
    return record.report()
