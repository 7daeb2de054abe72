"""
Bulgarian name days: who celebrates when, including the Easter-relative holidays.
"""
from namedays.data import get_all_fixed
from namedays.services.lookup import (
    find_by_name,
    get_all_name_days,
    get_today_names,
    is_celebrating,
    lookup_name,
    names_on_date,
)
from namedays.services.moveable import CatalogueIntegrityError
from namedays.services.search import names_for_holiday, search_by_prefix
from namedays.services.upcoming import upcoming
from namedays.utils.easter import orthodox_easter
from namedays.utils.logging import configure_structured_logging
from namedays.utils.normalize import extract_year, format_date_key, normalize
from namedays.utils.transliterate import transliterate

__version__ = "1.0.0"

__all__ = [
    "CatalogueIntegrityError",
    "configure_structured_logging",
    "extract_year",
    "find_by_name",
    "format_date_key",
    "get_all_fixed",
    "get_all_name_days",
    "get_today_names",
    "is_celebrating",
    "lookup_name",
    "names_for_holiday",
    "names_on_date",
    "normalize",
    "orthodox_easter",
    "search_by_prefix",
    "transliterate",
    "upcoming",
]
