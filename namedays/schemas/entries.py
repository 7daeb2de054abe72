"""
Dataset records - fixed name-day entries and the movable holiday catalogue.
Loaded once, validated on load, frozen afterwards.
"""
from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

Tradition = Literal["orthodox", "folk", "both"]


class NameDayEntry(BaseModel):
    """
    One name (with its variants) celebrating on one date.

    For movable entries (movable_id set) month/day are either a 0/0
    placeholder or, after roster expansion, the date resolved for one year.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Canonical display form (Cyrillic)")
    variants: tuple[str, ...] = ()
    latin_forms: tuple[str, ...] = ()
    month: int = Field(..., ge=0, le=12)
    day: int = Field(..., ge=0, le=31)
    holiday_name: str = Field(..., min_length=1)
    holiday_name_latin: str = Field(..., min_length=1)
    tradition: Tradition = "orthodox"
    movable_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_fixed_date(self) -> "NameDayEntry":
        if self.movable_id is None:
            try:
                date(2000, self.month, self.day)
            except ValueError:
                raise ValueError(
                    f"{self.name}: {self.month}-{self.day} is not a calendar day"
                )
        return self

    @property
    def is_movable(self) -> bool:
        return self.movable_id is not None

    @property
    def all_names(self) -> tuple[str, ...]:
        """Canonical name followed by the variants, each once."""
        return tuple(dict.fromkeys((self.name, *self.variants)))


class RosterMember(BaseModel):
    """A name sharing a movable holiday's date."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    variants: tuple[str, ...] = ()
    latin_forms: tuple[str, ...] = ()


class MovableHoliday(BaseModel):
    """Catalogue record: a holiday defined as a day offset from Orthodox Easter."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    holiday_name: str = Field(..., min_length=1)
    holiday_name_latin: str = Field(..., min_length=1)
    offset_days: int = Field(..., description="Days relative to Easter; 0 = Easter Sunday")
    tradition: Tradition = "orthodox"
    roster: tuple[RosterMember, ...] = Field(..., min_length=1)
