"""Compact duration tokens such as ``1h30m``, ``2h``, ``45m`` or ``90``."""

from __future__ import annotations

from ..core.constants import MAX_MINUTES, MINUTES_PER_HOUR
from ..core.exceptions import ValidationError
from .validators import require_non_empty, require_within_minutes_limit

_HOUR_UNITS = {"h", "H"}
_MINUTE_UNITS = {"m", "M"}
_MAX_DIGITS = len(str(MAX_MINUTES))


def parse_duration(text: str) -> int:
    """Parse a duration token into a positive number of minutes.

    Digits accumulate until a unit letter closes them; digits left over at the
    end count as minutes. A zero total is rejected.
    """
    require_non_empty(text, "Time string")

    total = 0
    pending = ""

    for ch in text:
        if ch.isdigit() and ch.isascii():
            pending += ch
            if len(pending.lstrip("0")) > _MAX_DIGITS:
                raise ValidationError(f"Time is too large (limit is {MAX_MINUTES} minutes)")
        elif ch in _HOUR_UNITS:
            if not pending:
                raise ValidationError("Invalid time format: missing number before 'h'")
            hours = require_within_minutes_limit(int(pending), "Hours")
            total += require_within_minutes_limit(hours * MINUTES_PER_HOUR, "Hours")
            pending = ""
        elif ch in _MINUTE_UNITS:
            if not pending:
                raise ValidationError("Invalid time format: missing number before 'm'")
            total += require_within_minutes_limit(int(pending), "Minutes")
            pending = ""
        else:
            raise ValidationError(f"Invalid character in time string: {ch}")
        require_within_minutes_limit(total, "Time")

    if pending:
        total += require_within_minutes_limit(int(pending), "Minutes")
        require_within_minutes_limit(total, "Time")

    if total == 0:
        raise ValidationError("Time must be greater than zero")

    return total


def format_minutes(minutes: int, *, pad_sign: bool = False) -> str:
    """Render signed minutes as ``Hh Mm``.

    Negative values get a leading ``-``. With ``pad_sign`` a non-negative value
    gets a leading space so that table columns line up.
    """
    sign = "-" if minutes < 0 else (" " if pad_sign else "")
    hours, rest = divmod(abs(minutes), MINUTES_PER_HOUR)
    return f"{sign}{hours}h {rest}m"
