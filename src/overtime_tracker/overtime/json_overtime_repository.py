from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import StorageError
from ..storage.data_file import DataFile
from .model import OvertimeEntry

logger = logging.getLogger(__name__)


class JsonOvertimeRepository:
    """Stores entries as ``{"entries": [{"date": "YYYY-MM-DD", "minutes": 90}, ...]}``."""

    def __init__(self, data_file: DataFile):
        self._data_file = data_file

    def load_entries(self) -> list[OvertimeEntry]:
        path = self._data_file.path()
        if not path.exists():
            logger.debug("No data file at %s yet", path)
            return []

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to read overtime data file {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise StorageError(f"Failed to parse overtime data file {path}: not valid UTF-8 ({exc})") from exc

        if not content.strip():
            return []

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Failed to parse overtime data file {path}: {exc}") from exc

        entries = self._decode(payload)
        logger.debug("Loaded %d entries from %s", len(entries), path)
        return entries

    def save_entries(self, entries: Sequence[OvertimeEntry]) -> None:
        path = self._data_file.path()
        payload = {"entries": [{"date": e.date.isoformat(), "minutes": e.minutes} for e in entries]}
        content = json.dumps(payload, indent=2) + "\n"

        # Temp file plus rename: readers never see a half-written file.
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".overtime-", suffix=".tmp", dir=path.parent)
            try:
                fh = os.fdopen(fd, "w", encoding="utf-8")
            except OSError:
                os.close(fd)
                raise
            with fh:
                fh.write(content)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write overtime data file {path}: {exc}") from exc

        logger.debug("Saved %d entries to %s", len(entries), path)

    @staticmethod
    def _decode(payload: Any) -> list[OvertimeEntry]:
        if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
            raise StorageError("Malformed overtime data file: expected an object with an 'entries' list")

        merged: dict = {}
        for index, raw in enumerate(payload["entries"]):
            if not isinstance(raw, dict):
                raise StorageError(f"Malformed overtime entry #{index}: expected an object")
            try:
                entry_date = parse_iso_date(str(raw["date"]))
                minutes = raw["minutes"]
            except KeyError as exc:
                raise StorageError(f"Malformed overtime entry #{index}: missing {exc}") from exc
            except ValueError as exc:
                raise StorageError(f"Malformed overtime entry #{index}: {exc}") from exc
            if isinstance(minutes, bool) or not isinstance(minutes, int):
                raise StorageError(f"Malformed overtime entry #{index}: minutes must be an integer")

            existing = merged.get(entry_date)
            if existing is None:
                merged[entry_date] = OvertimeEntry(date=entry_date, minutes=minutes)
            else:
                logger.warning("Duplicate entry for %s in data file, merging", entry_date.isoformat())
                existing.minutes += minutes

        return list(merged.values())
