# plaindate

`plaindate` works with calendar dates that have no time of day. A date lies
between `0001-01-01` and `9999-12-31` and is held as the number of days since
`0001-01-01`. The difference between two dates is a whole number of days.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install plaindate
```

## Creating dates

```python
from plaindate.date import Date, new, from_string, from_datetime, today, today_utc, zero_date

d = new(2000, 2, 29)          # raises ValueError for dates that do not exist
e = from_string("2024-05-17") # ISO "YYYY-MM-DD", raises ValueError otherwise
z = zero_date()               # 0001-01-01, the same as Date(0)
now = today()                 # date in the local time zone
now_utc = today_utc()         # date at UTC
```

`validate_date(year, month, day)` checks the three parts without building a
date. It raises `ValueError` when the year is outside 1–9999, the month is
outside 1–12, or the day does not exist in that month.

`from_datetime(value)` takes a `datetime.date` or `datetime.datetime` and
returns the date shown on its own wall clock, whatever its time zone.

`Date(offset)` builds a date straight from a day count; the count must lie
between 0 (`0001-01-01`) and 3,652,058 (`9999-12-31`), or `ValueError` is
raised.

## Reading a date

```python
d.ymd()          # (2000, 2, 29)
d.year()         # 2000
d.month()        # 2
d.day()          # 29
d.is_zero()      # False
d.offset         # days since 0001-01-01
str(d)           # "2000-02-29"
d.to_datetime()  # midnight at UTC as an aware datetime
```

## Arithmetic and comparison

```python
from plaindate.duration import Duration, DAY

delta = new(2001, 1, 31).sub(new(2001, 1, 1))   # Duration(30)
delta.days()                                    # 30
later = d.add(Duration(10))                     # ten days later
d.compare(later)                                # -1, 0 or 1

d + DAY          # the next day
d - 7            # a week earlier
later - d        # Duration(10)
```

`Duration` is an `int` subclass, so plain integers work wherever a duration is
expected. `add`, `+` and `-` with a number stop at the ends of the range: going
below `0001-01-01` gives `0001-01-01` and going past `9999-12-31` gives
`9999-12-31`. Dates are immutable, support `<`, `<=`, `>`, `>=` and `==`, and
can be used as dictionary keys.

## Text, JSON and SQL

```python
d.to_text()                      # "2000-02-29"
d.to_json()                      # '"2000-02-29"'
Date.from_text("2000-02-29")     # str or bytes
Date.from_json('"2000-02-29"')   # raises ValueError unless it is a JSON string

d.to_sql()                       # "2000-02-29"; the zero date gives None
Date.from_sql(None)              # the zero date
Date.from_sql(b"2000-01-01")     # str, bytes, date or datetime are accepted
```

`from_sql` raises `TypeError` for any other kind of value. These helpers only
convert values; the package does not open database connections or register
itself with any database driver.

## Month lengths

```python
from plaindate.gregorian import is_leap, days_in_year, days_in_month

is_leap(2000)            # True
days_in_year(2100)       # 365
days_in_month(2004, 2)   # 29
```

`days_in_month` raises `ValueError` for a month outside 1–12.