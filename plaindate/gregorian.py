"""Calendar arithmetic for the proleptic Gregorian calendar."""

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap(year: int) -> bool:
    """Report whether ``year`` is a leap year."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_year(year: int) -> int:
    """Return the number of days in ``year``."""
    return sum(days_in_month(year, month) for month in range(1, 13))


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month: {month}")
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]