from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass
class OvertimeEntry:
    """Net overtime booked on one calendar date. Negative minutes mean a deficit."""

    date: date
    minutes: int


@dataclass(frozen=True)
class MonthlyGroup:
    """Read-model: the entries of one (year, month), sorted by date."""

    year: int
    month: int
    entries: list[OvertimeEntry] = field(default_factory=list)


@dataclass(frozen=True)
class OvertimeReport:
    groups: list[MonthlyGroup]
    total_minutes: int

    @property
    def is_empty(self) -> bool:
        return not self.groups
