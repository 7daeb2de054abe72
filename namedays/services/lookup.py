"""
Lookup service - exact name and date queries against the per-year index.
Bad or empty input returns the empty value (None, [] or False) instead of raising.
"""
from typing import Any, Optional, Union

from namedays.schemas.results import NameDayResult, NameLookup
from namedays.services.index_cache import get_index
from namedays.utils.normalize import (
    current_year,
    format_date_key,
    is_date_key,
    normalize,
    parse_date,
    today,
)


def lookup_name(name: Any, year: Optional[int] = None) -> NameLookup:
    """
    Every date `name` celebrates in `year`.
    Matches canonical names, variants and Latin forms; one result per
    (canonical name, month, day), in index order.
    """
    key = normalize(name)
    if not key:
        return NameLookup.of([])

    index = get_index(year)
    seen = set()
    results = []
    for entry in index.by_name.get(key, ()):
        dedup_key = (entry.name, entry.month, entry.day)
        if dedup_key in seen:
            continue
        seen.add(dedup_key)
        results.append(NameDayResult.from_entry(entry))
    return NameLookup.of(results)


def find_by_name(
    name: Any,
    year: Optional[int] = None,
) -> Union[NameDayResult, list[NameDayResult], None]:
    """Single record, list of records when the name has several dates, or None."""
    return lookup_name(name, year).as_legacy()


def names_on_date(value: Any, year: Optional[int] = None) -> list[str]:
    """
    Names celebrating on a date.

    `value` is "MM-DD", an ISO date string, or a date/datetime. For "MM-DD"
    the movable entries are resolved against `year` (current year when
    omitted); otherwise the value's own year wins.
    """
    key = format_date_key(value)
    if key is None:
        return []

    if is_date_key(value):
        resolved_year = year if year is not None else current_year()
    else:
        resolved_year = parse_date(value).year

    names = []
    for entry in get_index(resolved_year).by_date.get(key, ()):
        names.extend(entry.all_names)
    return names


def is_celebrating(name: Any, value: Any) -> bool:
    """True if `name` has a name day on the given date (date, datetime or ISO string)."""
    key = normalize(name)
    on = parse_date(value)
    if not key or on is None:
        return False

    index = get_index(on.year)
    return any(
        entry.month == on.month and entry.day == on.day
        for entry in index.by_name.get(key, ())
    )


def get_all_name_days(year: Optional[int] = None) -> list[NameDayResult]:
    """Every entry of the year, fixed and resolved movable, as fresh records."""
    return [NameDayResult.from_entry(entry) for entry in get_index(year).entries]


def get_today_names() -> list[str]:
    return names_on_date(today())
