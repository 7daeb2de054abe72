"""
Upcoming name days - scans a window of consecutive days starting at a date.

Each day is resolved against its own year, so a window that crosses
New Year picks up the next year's movable dates.
"""
import logging
import math
from datetime import date, timedelta
from numbers import Real
from typing import Any, Optional

from namedays.schemas.results import UpcomingNameDay
from namedays.services.index_cache import get_index
from namedays.utils.normalize import date_key, parse_date, today

logger = logging.getLogger(__name__)

# longest scan; larger or infinite windows are cut to one year
MAX_WINDOW_DAYS = 366


def _window_length(window_days: Any) -> int:
    """Number of days to scan, or 0 for anything that is not a positive number."""
    if isinstance(window_days, bool) or not isinstance(window_days, Real):
        return 0
    if math.isnan(window_days) or window_days < 1:
        return 0
    if math.isinf(window_days) or window_days > MAX_WINDOW_DAYS:
        return MAX_WINDOW_DAYS
    return math.ceil(window_days)


def upcoming(window_days: Any, start_date: Optional[Any] = None) -> list[UpcomingNameDay]:
    """
    Celebrations in the next `window_days` days, start day included.
    Windows longer than MAX_WINDOW_DAYS are cut to MAX_WINDOW_DAYS.

    Results are ordered by date; within a day there is one record per holiday
    (first-seen order) with its names deduplicated.
    """
    days = _window_length(window_days)
    if not days:
        return []

    start = parse_date(start_date) if start_date is not None else None
    if start is None:
        if start_date is not None:
            logger.debug("Invalid start date %r, using today", start_date)
        start = today()

    # date.max is the last representable day
    days = min(days, (date.max - start).days + 1)

    results = []
    for offset in range(days):
        current = start + timedelta(days=offset)
        results.extend(_celebrations_on(current))
    return results


def _celebrations_on(current: date) -> list[UpcomingNameDay]:
    entries = get_index(current.year).by_date.get(date_key(current.month, current.day), ())
    if not entries:
        return []

    groups: dict[str, dict[str, None]] = {}
    for entry in entries:
        names = groups.setdefault(entry.holiday_name, {})
        for name in entry.all_names:
            names.setdefault(name)

    return [
        UpcomingNameDay(
            year=current.year,
            month=current.month,
            day=current.day,
            holiday_name=holiday_name,
            names=list(names),
        )
        for holiday_name, names in groups.items()
    ]
