"""Calendar dates from 0001-01-01 to 9999-12-31, without time of day.

A date is stored as the number of days since 0001-01-01; comparison,
arithmetic with :class:`Duration`, and text, JSON and SQL conversions
are provided.
"""

from __future__ import annotations

import datetime as _dt
import json
import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from .duration import Duration
from .gregorian import days_in_month

MAX_DAYS = 3_652_058  # 9999-12-31
ZERO_OFFSET = 719_162  # 1970-01-01

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date held as days elapsed since 0001-01-01."""

    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= MAX_DAYS:
            raise ValueError(f"date offset out of range: {self.offset}")

    def _as_date(self) -> _dt.date:
        return _dt.date.fromordinal(self.offset + 1)

    def to_datetime(self) -> _dt.datetime:
        """Return midnight UTC of this date."""
        return _dt.datetime.combine(self._as_date(), _dt.time(), tzinfo=_dt.timezone.utc)

    def ymd(self) -> Tuple[int, int, int]:
        """Return the (year, month, day) triple."""
        d = self._as_date()
        return d.year, d.month, d.day

    def year(self) -> int:
        return self._as_date().year

    def month(self) -> int:
        return self._as_date().month

    def day(self) -> int:
        return self._as_date().day

    def is_zero(self) -> bool:
        """Report whether this is the zero date, 0001-01-01."""
        return self.offset == 0

    def compare(self, other: Date) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after ``other``."""
        return (self.offset > other.offset) - (self.offset < other.offset)

    def sub(self, other: Date) -> Duration:
        """Return the number of days from ``other`` to this date."""
        return Duration(self.offset - other.offset)

    def add(self, duration: int) -> Date:
        """Return this date moved by ``duration`` days, clamped to the valid range."""
        return Date(min(max(self.offset + int(duration), 0), MAX_DAYS))

    def __add__(self, other: Any) -> Date:
        if isinstance(other, int):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> Union[Date, Duration]:
        if isinstance(other, Date):
            return self.sub(other)
        if isinstance(other, int):
            return self.add(-other)
        return NotImplemented

    def __str__(self) -> str:
        year, month, day = self.ymd()
        return f"{year:04d}-{month:02d}-{day:02d}"

    def to_text(self) -> str:
        """Return the date in ISO form, YYYY-MM-DD."""
        return str(self)

    def to_json(self) -> str:
        """Return the date as a JSON string literal."""
        return json.dumps(str(self))

    @classmethod
    def from_text(cls, data: Union[str, bytes, bytearray]) -> Date:
        """Parse an ISO YYYY-MM-DD date from text or bytes."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        return from_string(data)

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray]) -> Date:
        """Parse a JSON string literal holding an ISO date."""
        value = json.loads(data)
        if not isinstance(value, str):
            raise ValueError(f"expected a JSON string, got {type(value).__name__}")
        return from_string(value)

    @classmethod
    def from_sql(cls, value: Any) -> Date:
        """Build a date from a database value: None, text, bytes or a datetime."""
        if value is None:
            return zero_date()
        if isinstance(value, (str, bytes, bytearray)):
            return cls.from_text(value)
        if isinstance(value, _dt.date):
            return from_datetime(value)
        raise TypeError(f"unsupported type: {type(value).__name__}")

    def to_sql(self) -> Optional[str]:
        """Return the database value: None for the zero date, else ISO text."""
        return None if self.is_zero() else str(self)


def validate_date(year: int, month: int, day: int) -> None:
    """Raise ValueError unless year, month and day name an existing date."""
    if not 1 <= year <= 9999:
        raise ValueError(f"invalid year: {year}")
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month: {month}")
    if not 1 <= day <= days_in_month(year, month):
        raise ValueError(f"invalid day: {day}")


def zero_date() -> Date:
    """Return the zero date, 0001-01-01."""
    return Date(0)


def new(year: int, month: int, day: int) -> Date:
    """Return the date for year, month and day, raising ValueError if invalid."""
    validate_date(year, month, day)
    return Date(_dt.date(year, month, day).toordinal() - 1)


def from_datetime(value: _dt.date) -> Date:
    """Return the date on the wall clock of ``value`` in its own time zone."""
    if isinstance(value, _dt.datetime):
        value = value.date()
    return Date(value.toordinal() - 1)


def from_string(text: str) -> Date:
    """Parse an ISO YYYY-MM-DD date."""
    match = _ISO_DATE.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    validate_date(year, month, day)
    return new(year, month, day)


def today() -> Date:
    """Return the current date in the local time zone."""
    return from_datetime(_dt.datetime.now().astimezone())


def today_utc() -> Date:
    """Return the current date in UTC."""
    return from_datetime(_dt.datetime.now(_dt.timezone.utc))