"""
Static name-day dataset: fixed-date entries and the movable holiday catalogue.

Both tables are read from JSON once per process, validated into frozen
pydantic models and shared read-only afterwards. Malformed data fails fast
with pydantic.ValidationError.
"""
import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

from namedays.config import get_settings
from namedays.schemas.entries import MovableHoliday, NameDayEntry

logger = logging.getLogger(__name__)

FIXED_ENTRIES_FILE = "fixed_entries.json"
MOVABLE_HOLIDAYS_FILE = "movable_holidays.json"


def _read_json(filename: str) -> Any:
    data_dir = get_settings().data_dir
    if data_dir:
        raw = (Path(data_dir) / filename).read_text(encoding="utf-8")
    else:
        raw = resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")
    return json.loads(raw)


@lru_cache(maxsize=1)
def load_fixed_entries() -> tuple[NameDayEntry, ...]:
    """All fixed-date entries, in dataset order."""
    entries = tuple(NameDayEntry(**item) for item in _read_json(FIXED_ENTRIES_FILE))
    for entry in entries:
        if entry.movable_id is not None:
            raise ValueError(f"Fixed entry {entry.name} must not reference movable holiday {entry.movable_id}")
    logger.debug("Loaded %d fixed name-day entries", len(entries))
    return entries


@lru_cache(maxsize=1)
def load_movable_holidays() -> tuple[MovableHoliday, ...]:
    """The movable holiday catalogue, in dataset order."""
    holidays = tuple(MovableHoliday(**item) for item in _read_json(MOVABLE_HOLIDAYS_FILE))
    ids = [h.id for h in holidays]
    if len(ids) != len(set(ids)):
        raise ValueError("Duplicate movable holiday ids in catalogue")
    logger.debug("Loaded %d movable holidays", len(holidays))
    return holidays


def get_all_fixed() -> list[NameDayEntry]:
    """Fixed-date entries as a new list (the records themselves are frozen)."""
    return list(load_fixed_entries())


def reload_dataset() -> None:
    """
    Re-read settings and both tables on next access and drop every built index,
    so a changed data_dir or edited JSON is picked up by the next query.
    """
    from namedays.services.index_cache import reset_index_cache

    get_settings.cache_clear()
    load_fixed_entries.cache_clear()
    load_movable_holidays.cache_clear()
    reset_index_cache()
    logger.info("Name-day dataset and built indexes reset")
