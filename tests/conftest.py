"""
Test configuration and fixtures.
Every test starts with fresh settings, a freshly loaded dataset and an empty index cache.
"""
import pytest

from namedays.data import reload_dataset
from namedays.schemas.entries import MovableHoliday, NameDayEntry, RosterMember

_ENV_VARS = (
    "NAMEDAYS_LOG_LEVEL",
    "NAMEDAYS_TIMEZONE",
    "NAMEDAYS_INDEX_CACHE_MAX_YEARS",
    "NAMEDAYS_STRICT_CATALOGUE",
    "NAMEDAYS_DATA_DIR",
)


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reload_dataset()
    yield
    reload_dataset()


@pytest.fixture
def set_env(monkeypatch):
    """Set NAMEDAYS_* variables and drop cached settings/indexes so they take effect."""
    def _set(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"NAMEDAYS_{key.upper()}", str(value))
        reload_dataset()
    return _set


@pytest.fixture
def small_catalogue():
    """Two movable holidays: Easter itself and the Saturday 43 days before it."""
    return (
        MovableHoliday(
            id="todorovden",
            holiday_name="Тодоровден",
            holiday_name_latin="Todorovden",
            offset_days=-43,
            tradition="both",
            roster=(RosterMember(name="Тодор", variants=("Тодорка",), latin_forms=("Todor", "Todorka")),),
        ),
        MovableHoliday(
            id="velikden",
            holiday_name="Великден",
            holiday_name_latin="Velikden",
            offset_days=0,
            roster=(
                RosterMember(name="Велика", variants=("Величка",), latin_forms=("Velika",)),
                RosterMember(name="Паскал", latin_forms=("Paskal",)),
            ),
        ),
    )


@pytest.fixture
def small_fixed():
    return (
        NameDayEntry(
            name="Георги",
            variants=("Гошо", "Жоро"),
            latin_forms=("Georgi", "Gosho"),
            month=5,
            day=6,
            holiday_name="Гергьовден",
            holiday_name_latin="Gergyovden",
            tradition="both",
        ),
        NameDayEntry(
            name="Стефан",
            variants=("Стефка",),
            latin_forms=("Stefan",),
            month=12,
            day=27,
            holiday_name="Стефановден",
            holiday_name_latin="Stefanovden",
        ),
    )
