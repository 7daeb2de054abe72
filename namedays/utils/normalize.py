"""
Text and date normalization helpers shared by the index and the lookups.
Nothing here raises on bad input.
"""
import re
from datetime import date, datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse

from namedays.config import get_settings

_DATE_KEY = re.compile(r"^(\d{2})-(\d{2})$")


def normalize(text: Any) -> str:
    """Trim and lowercase. Non-string input normalizes to an empty string."""
    if not text or not isinstance(text, str):
        return ""
    return text.strip().lower()


def date_key(month: int, day: int) -> str:
    """Zero-padded "MM-DD" key."""
    return f"{month:02d}-{day:02d}"


def _valid_month_day(month: int, day: int) -> bool:
    if not 1 <= month <= 12:
        return False
    # leap year reference so 02-29 is accepted
    try:
        date(2000, month, day)
    except ValueError:
        return False
    return True


def is_date_key(value: Any) -> bool:
    """True for a bare "MM-DD" string (no year)."""
    return isinstance(value, str) and _DATE_KEY.match(value.strip()) is not None


def parse_date(value: Any) -> Optional[date]:
    """
    Coerce a date-like value to a date.
    Accepts date, datetime and ISO 8601 strings ("2026-05-06", "2026-05-06T10:00").
    Returns None for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return isoparse(value.strip()).date()
        except (ValueError, OverflowError):
            return None
    return None


def format_date_key(value: Any) -> Optional[str]:
    """
    Format a date-like value as "MM-DD".

    - "MM-DD" strings pass through when they name a real calendar day
    - date / datetime / ISO strings are formatted
    - everything else returns None
    """
    if not value:
        return None

    if isinstance(value, str):
        match = _DATE_KEY.match(value.strip())
        if match:
            month, day = int(match.group(1)), int(match.group(2))
            return date_key(month, day) if _valid_month_day(month, day) else None

    parsed = parse_date(value)
    if parsed is None:
        return None
    return date_key(parsed.month, parsed.day)


def today(tz_name: Optional[str] = None) -> date:
    """Current date in the configured zone."""
    if tz_name is None:
        tz_name = get_settings().timezone
    return datetime.now(ZoneInfo(tz_name)).date()


def current_year() -> int:
    return today().year


def extract_year(value: Any) -> int:
    """Year of a date-like value, or the current year when it has none."""
    parsed = parse_date(value)
    if parsed is None:
        return current_year()
    return parsed.year
