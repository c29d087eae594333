"""
FILE: tap/core/timestamp.py
PURPOSE: Point-in-time value type with parsing, comparison and formatting
EXPORTS:
  - Timestamp (frozen dataclass, seconds since the Unix epoch)
  - format_timestamp(ts) -> str
DEPENDENCIES:
  - time, datetime (stdlib)
  - tap.core.constants, tap.core.exceptions
NOTES:
  - There is no "unset" Timestamp; optional timestamps are None
  - Absolute strings ("2024-05-01 18:00") are read in local time
  - Relative strings ("1d12h") are offsets added to now
"""

import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from .constants import (
    DATE_SEPARATORS,
    TIMESTAMP_FORMAT,
    TIMESTAMP_PLACEHOLDER,
    UNIT_SECONDS,
)
from .exceptions import TimestampError

DIGITS = "0123456789"


class _Field(Enum):
    """States of the absolute time scanner, one per date/time field."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    DONE = "done"


# One transition per separator character
_NEXT_FIELD = {
    _Field.YEAR: _Field.MONTH,
    _Field.MONTH: _Field.DAY,
    _Field.DAY: _Field.HOUR,
    _Field.HOUR: _Field.MINUTE,
    _Field.MINUTE: _Field.SECOND,
    _Field.SECOND: _Field.DONE,
}


@dataclass(frozen=True, order=True)
class Timestamp:
    """A moment in time, as whole seconds since the epoch."""

    seconds: int

    @classmethod
    def now(cls) -> "Timestamp":
        """Current wall-clock time."""
        return cls(int(time.time()))

    @classmethod
    def from_seconds(cls, seconds: int) -> "Timestamp":
        return cls(int(seconds))

    @classmethod
    def parse(cls, text: str, now: Optional["Timestamp"] = None) -> "Timestamp":
        """
        Parse an absolute or relative time string.

        Args:
            text: Time string. Without letters it is absolute
                (year-month-day hour:minute:second, any of "-", "/", " ",
                ":" as separator, trailing fields optional). With letters
                it is relative: <n><unit> pairs, unit one of y, m, d, h, s.
            now: Reference moment (defaults to the current time)

        Returns:
            Parsed Timestamp

        Raises:
            TimestampError: On empty input, an invalid character or an
                unknown unit letter
        """
        if now is None:
            now = cls.now()

        if any(ch.isalpha() for ch in text):
            return _parse_relative(text, now)
        return _parse_absolute(text, now)

    def __add__(self, offset: int) -> "Timestamp":
        if not isinstance(offset, int):
            return NotImplemented
        return Timestamp(self.seconds + offset)

    def __sub__(self, other: Union[int, "Timestamp"]):
        if isinstance(other, Timestamp):
            return self.seconds - other.seconds
        if isinstance(other, int):
            return Timestamp(self.seconds - other)
        return NotImplemented

    def to_datetime(self) -> datetime:
        """Convert to a naive local datetime."""
        try:
            return datetime.fromtimestamp(self.seconds)
        except (OverflowError, OSError, ValueError) as e:
            raise TimestampError(f"timestamp {self.seconds} out of range: {e}") from e

    def __str__(self) -> str:
        return self.to_datetime().strftime(TIMESTAMP_FORMAT)


def format_timestamp(ts: Optional[Timestamp]) -> str:
    """Render a timestamp, or the placeholder when it is not set."""
    if ts is None:
        return TIMESTAMP_PLACEHOLDER
    try:
        return str(ts)
    except TimestampError:
        return f"@{ts.seconds}"


def _parse_absolute(text: str, now: Timestamp) -> Timestamp:
    if not text:
        raise TimestampError("empty input string", text)

    # Year comes from now, everything below it starts at its minimum
    fields = {
        _Field.YEAR: time.localtime(now.seconds).tm_year,
        _Field.MONTH: 1,
        _Field.DAY: 1,
        _Field.HOUR: 0,
        _Field.MINUTE: 0,
        _Field.SECOND: 0,
    }

    state = _Field.YEAR
    current = 0

    for ch in text:
        if ch in DIGITS:
            if state is _Field.DONE:
                break
            current = current * 10 + int(ch)
            fields[state] = current
        elif ch in DATE_SEPARATORS:
            if state is _Field.DONE:
                break
            state = _NEXT_FIELD[state]
            current = 0
        else:
            raise TimestampError(f"invalid character {ch}", text)

    # mktime normalizes out-of-range fields (month 13 -> January next year)
    parts = (
        fields[_Field.YEAR],
        fields[_Field.MONTH],
        fields[_Field.DAY],
        fields[_Field.HOUR],
        fields[_Field.MINUTE],
        fields[_Field.SECOND],
        0,
        0,
        -1,
    )
    try:
        seconds = time.mktime(parts)
    except (OverflowError, ValueError) as e:
        raise TimestampError(f"date out of range: {e}", text) from e

    return Timestamp(int(seconds))


def _parse_relative(text: str, now: Timestamp) -> Timestamp:
    number = 0
    offset = 0

    for ch in text:
        if ch in DIGITS:
            number = number * 10 + int(ch)
            continue

        unit = UNIT_SECONDS.get(ch)
        if unit is None:
            raise TimestampError(f"invalid time specifier {ch}", text)
        offset += number * unit
        number = 0

    return now + offset
