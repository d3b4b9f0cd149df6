"""
Parsing of user-typed date/time text (CLI arguments, interactive prompts).

Accepted formats:
- date: YYYY-MM-DD
- time: HH:MM (24h)

The core never sees text; anything malformed is rejected here with a
ValueError carrying a readable message.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_date(text: str) -> date:
    """
    Parse 'YYYY-MM-DD'. Raises ValueError for invalid input.
    """
    s = (text or "").strip()
    try:
        return datetime.strptime(s, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid date {text!r} (expected YYYY-MM-DD)") from None


def parse_time(text: str) -> time:
    """
    Parse 'HH:MM'. Raises ValueError for invalid input.
    """
    s = (text or "").strip()
    try:
        return datetime.strptime(s, TIME_FORMAT).time()
    except ValueError:
        raise ValueError(f"Invalid time {text!r} (expected HH:MM)") from None


def parse_datetime(date_text: str, time_text: str) -> datetime:
    return datetime.combine(parse_date(date_text), parse_time(time_text))


def parse_optional_date(text: Optional[str], default: date) -> date:
    """
    Parse text if given, otherwise return default.
    """
    if text is None or not text.strip():
        return default
    return parse_date(text)
