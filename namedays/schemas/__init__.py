from namedays.schemas.entries import MovableHoliday, NameDayEntry, RosterMember, Tradition
from namedays.schemas.results import (
    NameDayResult,
    NameLookup,
    ResolvedDate,
    SearchResult,
    UpcomingNameDay,
)

__all__ = [
    "MovableHoliday",
    "NameDayEntry",
    "RosterMember",
    "Tradition",
    "NameDayResult",
    "NameLookup",
    "ResolvedDate",
    "SearchResult",
    "UpcomingNameDay",
]
