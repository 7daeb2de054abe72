"""
Orthodox Easter (Pascha) computation - the anchor for every movable name day.

Gauss congruence method on the Julian calendar, shifted by the fixed 13-day
Julian -> Gregorian difference. The shift is only correct for 1900-2099;
outside that window the result is unspecified and callers must not rely on it.
"""
from datetime import date, timedelta
from functools import lru_cache

# Julian -> Gregorian difference for the 20th and 21st centuries
JULIAN_GREGORIAN_OFFSET_DAYS = 13

SUPPORTED_YEARS = range(1900, 2100)


def is_supported_year(year: int) -> bool:
    """True when the 13-day correction is valid for this year."""
    return year in SUPPORTED_YEARS


@lru_cache(maxsize=256)
def orthodox_easter(year: int) -> date:
    """
    Compute the Gregorian date of Orthodox Easter Sunday for a year.

    Steps:
    1. Julian Paschal full moon offset `d` and weekday correction `e`
    2. Julian Easter = March (d + e + 22)
    3. Add 13 days; day overflow rolls into April/May
    """
    a = year % 19
    b = year % 4
    c = year % 7
    d = (19 * a + 15) % 30
    e = (2 * b + 4 * c + 6 * d + 6) % 7

    julian_march_day = d + e + 22

    # date arithmetic takes care of March -> April -> May overflow
    return date(year, 3, 1) + timedelta(
        days=julian_march_day + JULIAN_GREGORIAN_OFFSET_DAYS - 1
    )


def compute_anchor_date(year: int) -> date:
    """Anchor date for movable holidays of `year` (Orthodox Easter)."""
    return orthodox_easter(year)
