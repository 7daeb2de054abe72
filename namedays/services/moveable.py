"""
Movable holiday resolution - projects Easter-relative holidays onto real dates.

Every movable holiday is stored as a day offset from Orthodox Easter.
For a given year the offsets are applied to that year's Easter, and each
holiday's roster is expanded into fully dated NameDayEntry records so the
index never has to resolve anything again.
"""
import logging
from datetime import timedelta
from typing import Optional, Sequence

from namedays.config import get_settings
from namedays.data import load_movable_holidays
from namedays.schemas.entries import MovableHoliday, NameDayEntry
from namedays.schemas.results import ResolvedDate
from namedays.utils.easter import compute_anchor_date

logger = logging.getLogger(__name__)


class CatalogueIntegrityError(LookupError):
    """An entry references a movable holiday id that is not in the catalogue."""


def resolve_all_offsets(
    year: int,
    holidays: Optional[Sequence[MovableHoliday]] = None,
) -> dict[str, tuple[int, int]]:
    """
    Map every catalogue id to its (month, day) in `year`.
    Offsets roll across month boundaries (Easter - 43 can land in February).
    """
    if holidays is None:
        holidays = load_movable_holidays()

    anchor = compute_anchor_date(year)
    dates = {}
    for holiday in holidays:
        resolved = anchor + timedelta(days=holiday.offset_days)
        dates[holiday.id] = (resolved.month, resolved.day)
    return dates


def resolve_entry_date(
    entry: NameDayEntry,
    year: int,
    holidays: Optional[Sequence[MovableHoliday]] = None,
) -> ResolvedDate:
    """
    Date an entry falls on in `year`.

    Fixed entries return their own month/day. Movable entries are looked up
    in the year's offsets; an id missing from the catalogue falls back to the
    entry's placeholder date with resolved=False (or raises
    CatalogueIntegrityError when strict_catalogue is enabled).
    """
    if entry.movable_id is None:
        return ResolvedDate(month=entry.month, day=entry.day)

    dates = resolve_all_offsets(year, holidays)
    resolved = dates.get(entry.movable_id)
    if resolved is not None:
        return ResolvedDate(month=resolved[0], day=resolved[1])

    if get_settings().strict_catalogue:
        raise CatalogueIntegrityError(
            f"Movable holiday '{entry.movable_id}' referenced by {entry.name} is not in the catalogue"
        )

    logger.warning(
        "Unknown movable holiday %s for %s - using placeholder date %02d-%02d",
        entry.movable_id, entry.name, entry.month, entry.day,
        extra={"movable_id": entry.movable_id, "year": year},
    )
    return ResolvedDate(month=entry.month, day=entry.day, resolved=False)


def expand_holiday_roster(
    year: int,
    holidays: Optional[Sequence[MovableHoliday]] = None,
) -> list[NameDayEntry]:
    """
    Build one dated NameDayEntry per roster member of every movable holiday.
    Output order: catalogue order, then roster order.
    """
    if holidays is None:
        holidays = load_movable_holidays()

    dates = resolve_all_offsets(year, holidays)
    entries = []
    for holiday in holidays:
        month, day = dates[holiday.id]
        for member in holiday.roster:
            entries.append(NameDayEntry(
                name=member.name,
                variants=member.variants,
                latin_forms=member.latin_forms,
                month=month,
                day=day,
                holiday_name=holiday.holiday_name,
                holiday_name_latin=holiday.holiday_name_latin,
                tradition=holiday.tradition,
                movable_id=holiday.id,
            ))
    return entries
