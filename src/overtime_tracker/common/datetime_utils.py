from __future__ import annotations

import re
from datetime import date, datetime

from ..core.constants import STORAGE_DATE_FORMAT
from ..core.exceptions import ValidationError

_COMPACT_LEN = 8
_DOTTED_RE = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$")


def _build_date(year: str, month: str, day: str) -> date:
    try:
        return date(int(year), int(month), int(day))
    except ValueError as exc:
        raise ValidationError(f"Invalid date components: {exc}") from exc


def parse_date(value: str) -> date:
    """Parse ``ddmmYYYY`` or ``dd.mm.YYYY`` into a date."""
    if len(value) == _COMPACT_LEN:
        if not (value.isdigit() and value.isascii()):
            raise ValidationError(f"Failed to parse date '{value}', expected digits only in ddmmYYYY")
        return _build_date(value[4:8], value[2:4], value[0:2])

    match = _DOTTED_RE.match(value)
    if not match:
        raise ValidationError(f"Failed to parse date '{value}', expected format: ddmmYYYY or dd.mm.YYYY")
    day, month, year = match.groups()
    return _build_date(year, month, day)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, STORAGE_DATE_FORMAT).date()


def format_date(value: date) -> str:
    # strftime drops the zero padding of years below 1000 on some platforms.
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"
