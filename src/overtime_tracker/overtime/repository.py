from __future__ import annotations

from typing import Protocol, Sequence

from .model import OvertimeEntry


class OvertimeRepository(Protocol):
    def load_entries(self) -> list[OvertimeEntry]:
        """Return every stored entry; an absent or blank store yields an empty list."""

        raise NotImplementedError

    def save_entries(self, entries: Sequence[OvertimeEntry]) -> None:
        """Replace the stored sequence with ``entries``."""

        raise NotImplementedError
