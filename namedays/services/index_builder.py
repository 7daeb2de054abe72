"""
Per-year name-day index.

Merges the fixed entries with the year's resolved movable entries and files
each entry under three keys:
- by_name:    normalized canonical name, every variant, every Latin form
- by_date:    zero-padded "MM-DD" of the resolved date
- by_holiday: normalized holiday name (substring matching happens at query time)

Buckets keep insertion order: fixed entries first, then movable entries,
each in dataset order. An index is never modified after build.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from namedays.data import load_fixed_entries
from namedays.schemas.entries import MovableHoliday, NameDayEntry
from namedays.services.moveable import expand_holiday_roster, resolve_entry_date
from namedays.utils.normalize import date_key, normalize


class ResolvedIndex:
    """Read-only lookup tables for one year."""

    __slots__ = ("_year", "_entries", "_by_name", "_by_date", "_by_holiday")

    def __init__(
        self,
        year: int,
        entries: tuple[NameDayEntry, ...],
        by_name: dict[str, tuple[NameDayEntry, ...]],
        by_date: dict[str, tuple[NameDayEntry, ...]],
        by_holiday: dict[str, tuple[NameDayEntry, ...]],
    ):
        self._year = year
        self._entries = entries
        self._by_name = MappingProxyType(by_name)
        self._by_date = MappingProxyType(by_date)
        self._by_holiday = MappingProxyType(by_holiday)

    @property
    def year(self) -> int:
        return self._year

    @property
    def entries(self) -> tuple[NameDayEntry, ...]:
        return self._entries

    @property
    def by_name(self) -> Mapping[str, tuple[NameDayEntry, ...]]:
        return self._by_name

    @property
    def by_date(self) -> Mapping[str, tuple[NameDayEntry, ...]]:
        return self._by_date

    @property
    def by_holiday(self) -> Mapping[str, tuple[NameDayEntry, ...]]:
        return self._by_holiday

    def __repr__(self) -> str:
        return f"ResolvedIndex(year={self._year}, entries={len(self._entries)})"


def _name_keys(entry: NameDayEntry) -> Iterable[str]:
    """Normalized lookup keys of an entry, each once."""
    keys = [normalize(entry.name)]
    keys.extend(normalize(v) for v in entry.variants)
    keys.extend(normalize(form) for form in entry.latin_forms)
    return dict.fromkeys(k for k in keys if k)


def _dated(
    entry: NameDayEntry,
    year: int,
    holidays: Optional[Sequence[MovableHoliday]],
) -> NameDayEntry:
    """Entry with its date for `year` written into month/day."""
    if entry.movable_id is None:
        return entry
    resolved = resolve_entry_date(entry, year, holidays)
    return entry.model_copy(update={"month": resolved.month, "day": resolved.day})


def _freeze(buckets: dict[str, list[NameDayEntry]]) -> dict[str, tuple[NameDayEntry, ...]]:
    return {key: tuple(bucket) for key, bucket in buckets.items()}


def build_index(
    year: int,
    fixed_entries: Optional[Sequence[NameDayEntry]] = None,
    holidays: Optional[Sequence[MovableHoliday]] = None,
) -> ResolvedIndex:
    """Build the three lookup tables for `year`."""
    if fixed_entries is None:
        fixed_entries = load_fixed_entries()

    entries = (
        *(_dated(entry, year, holidays) for entry in fixed_entries),
        *expand_holiday_roster(year, holidays),
    )

    by_name: dict[str, list[NameDayEntry]] = {}
    by_date: dict[str, list[NameDayEntry]] = {}
    by_holiday: dict[str, list[NameDayEntry]] = {}

    for entry in entries:
        for key in _name_keys(entry):
            by_name.setdefault(key, []).append(entry)

        by_date.setdefault(date_key(entry.month, entry.day), []).append(entry)

        holiday_key = normalize(entry.holiday_name)
        if holiday_key:
            by_holiday.setdefault(holiday_key, []).append(entry)

    return ResolvedIndex(
        year=year,
        entries=entries,
        by_name=_freeze(by_name),
        by_date=_freeze(by_date),
        by_holiday=_freeze(by_holiday),
    )
