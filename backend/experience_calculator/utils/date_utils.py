# date_utils.py - Date parsing for entry input
#
# ISO YYYY-MM-DD is the exchange format. The CSV ingest path also accepts the
# day-first and month-only spellings people tend to keep in spreadsheets.

import re
from datetime import date, datetime
from typing import Any

_DMY = re.compile(r'^(\d{1,2})[\/-](\d{1,2})[\/-](\d{4})$')
_MY = re.compile(r'^(\d{1,2})\/(\d{4})$')
_YM = re.compile(r'^(\d{4})[\/-](\d{1,2})$')


def parse_date(value: Any) -> date:
    """
    Convert an ISO date string (or a date/datetime) into a ``date``.

    Raises:
        ValueError: If the value is not a well-formed calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")


def normalize_date(value: Any) -> date:
    """
    Lenient parser used for uploaded CSV rows.

    Accepts ISO ``YYYY-MM-DD``, ``DD/MM/YYYY``, ``MM/YYYY`` and ``YYYY-MM``.
    Month-only values resolve to the first day of that month.
    """
    if isinstance(value, (date, datetime)):
        return parse_date(value)
    s = str(value).strip() if value is not None else ""
    if not s:
        raise ValueError("Date is required")
    m = _DMY.match(s)
    if m:
        return _build(int(m.group(3)), int(m.group(2)), int(m.group(1)), s)
    m = _MY.match(s)
    if m:
        return _build(int(m.group(2)), int(m.group(1)), 1, s)
    m = _YM.match(s)
    if m:
        return _build(int(m.group(1)), int(m.group(2)), 1, s)
    return parse_date(s)


def _build(year: int, month: int, day: int, raw: str) -> date:
    try:
        return date(year, month, day)
    except ValueError:
        raise ValueError(f"Invalid date '{raw}'")
