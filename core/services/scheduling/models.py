from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class CPMNode:
    """Per-task working state of one critical path calculation, in workday units."""

    id: str
    duration: int
    early_start: int = 0
    early_finish: int = 0
    late_start: float = float("inf")
    late_finish: float = float("inf")
    total_float: float = 0.0

    @property
    def is_critical(self) -> bool:
        return abs(self.total_float) < 0.001


@dataclass(frozen=True)
class DateUpdate:
    start_date: date
    end_date_calculated: date
