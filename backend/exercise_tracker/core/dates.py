"""Calendar Dates: parsing of client date strings and day-string rendering.

Invariants:
    - Comparison granularity is the calendar day; time-of-day is discarded
    - format_day_string output is locale-independent ("Mon Jan 01 2024")
    - parse_calendar_date returns None instead of raising

Design Decisions:
    - Hand-built weekday/month names over strftime("%a %b"): strftime follows
      the process locale, the API contract is English
"""

from datetime import date, datetime

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_day_string(value: date) -> str:
    """Render a date as "Tue Jan 02 2024"."""
    return (
        f"{WEEKDAY_NAMES[value.weekday()]} {MONTH_NAMES[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def parse_calendar_date(raw: str) -> date | None:
    """Parse an ISO date, ISO datetime or day-string. None if unparseable."""
    text = raw.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    return _parse_day_string(text)


def _parse_day_string(text: str) -> date | None:
    parts = text.split()
    if len(parts) != 4:
        return None
    weekday, month, day, year = parts
    if month not in MONTH_NAMES or not day.isdigit() or not year.isdigit():
        return None
    try:
        parsed = date(int(year), MONTH_NAMES.index(month) + 1, int(day))
    except ValueError:
        return None
    # weekday is redundant; a mismatch means the string was hand-edited
    if WEEKDAY_NAMES[parsed.weekday()] != weekday:
        return None
    return parsed
