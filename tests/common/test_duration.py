import pytest

from overtime_tracker.common.duration import format_minutes, parse_duration
from overtime_tracker.core.constants import MAX_MINUTES
from overtime_tracker.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1h30m", 90),
        ("90", 90),
        ("2h", 120),
        ("45m", 45),
        ("30m1h", 90),
        ("1H15M", 75),
        ("1h30", 90),
        ("0h5m", 5),
    ],
)
def test_parse_duration_valid_tokens(token, expected):
    assert parse_duration(token) == expected


@pytest.mark.parametrize("token", ["", "h30", "30x", "0h0m", "0", "m", "1h 30m", "-30"])
def test_parse_duration_rejects_invalid_tokens(token):
    with pytest.raises(ValidationError):
        parse_duration(token)


def test_parse_duration_reports_offending_character():
    with pytest.raises(ValidationError, match="Invalid character in time string: x"):
        parse_duration("30x")


def test_parse_duration_reports_missing_number_before_unit():
    with pytest.raises(ValidationError, match="missing number before 'h'"):
        parse_duration("h30")


def test_parse_duration_accepts_upper_limit():
    assert parse_duration(str(MAX_MINUTES)) == MAX_MINUTES


@pytest.mark.parametrize("token", [str(MAX_MINUTES + 1), "99999999999999999999", "40000000h", f"{MAX_MINUTES}m1m"])
def test_parse_duration_rejects_overflow(token):
    with pytest.raises(ValidationError, match="too large"):
        parse_duration(token)


def test_format_minutes_splits_hours_and_keeps_sign():
    assert format_minutes(90) == "1h 30m"
    assert format_minutes(-50) == "-0h 50m"
    assert format_minutes(0) == "0h 0m"
    assert format_minutes(-125) == "-2h 5m"


def test_format_minutes_pads_non_negative_sign_for_tables():
    assert format_minutes(90, pad_sign=True) == " 1h 30m"
    assert format_minutes(-20, pad_sign=True) == "-0h 20m"


@pytest.mark.parametrize("token, expected", [("00000000090", 90), ("000000000001h", 60), ("0002147483647", MAX_MINUTES)])
def test_parse_duration_ignores_leading_zeros_for_limit(token, expected):
    assert parse_duration(token) == expected
