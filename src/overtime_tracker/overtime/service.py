from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.exceptions import NotFoundError
from .model import MonthlyGroup, OvertimeEntry, OvertimeReport
from .repository import OvertimeRepository

logger = logging.getLogger(__name__)


class OvertimeService:
    """Use case: book, correct and summarise overtime.

    Entries are loaded lazily on first use and kept for the lifetime of the
    service; every mutation is written back immediately.
    """

    def __init__(self, overtime: OvertimeRepository):
        self._overtime = overtime
        self._entries: Optional[list[OvertimeEntry]] = None

    @property
    def entries(self) -> list[OvertimeEntry]:
        if self._entries is None:
            self._entries = self._overtime.load_entries()
        return self._entries

    def _find(self, entry_date: date) -> Optional[OvertimeEntry]:
        for entry in self.entries:
            if entry.date == entry_date:
                return entry
        return None

    def add(self, entry_date: date, minutes: int) -> OvertimeEntry:
        entry = self._find(entry_date)
        if entry is None:
            entry = OvertimeEntry(date=entry_date, minutes=minutes)
            self.entries.append(entry)
        else:
            entry.minutes += minutes

        self._overtime.save_entries(self.entries)
        logger.debug("Added %d minutes on %s, now %d", minutes, entry_date.isoformat(), entry.minutes)
        return entry

    def remove(self, entry_date: date, minutes: int) -> OvertimeEntry:
        entry = self._find(entry_date)
        if entry is None:
            raise NotFoundError("No overtime entry found for the specified date")

        entry.minutes -= minutes
        self._overtime.save_entries(self.entries)
        logger.debug("Removed %d minutes on %s, now %d", minutes, entry_date.isoformat(), entry.minutes)
        return entry

    def build_report(self) -> OvertimeReport:
        groups: dict[tuple[int, int], MonthlyGroup] = {}
        total_minutes = 0

        for entry in sorted(self.entries, key=lambda e: e.date):
            key = (entry.date.year, entry.date.month)
            group = groups.get(key)
            if group is None:
                group = MonthlyGroup(year=entry.date.year, month=entry.date.month)
                groups[key] = group
            group.entries.append(entry)
            total_minutes += entry.minutes

        return OvertimeReport(groups=[groups[key] for key in sorted(groups)], total_minutes=total_minutes)
