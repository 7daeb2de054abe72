"""
Result records returned to callers.
Always built fresh per call - never the indexed entries themselves.
"""
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from namedays.schemas.entries import NameDayEntry, Tradition


class NameDayResult(BaseModel):
    name: str
    month: int
    day: int
    holiday_name: str
    holiday_name_latin: str
    tradition: Tradition
    variants: list[str] = Field(default_factory=list)
    latin_forms: list[str] = Field(default_factory=list)
    is_movable: bool = False

    @classmethod
    def from_entry(cls, entry: NameDayEntry) -> "NameDayResult":
        return cls(
            name=entry.name,
            month=entry.month,
            day=entry.day,
            holiday_name=entry.holiday_name,
            holiday_name_latin=entry.holiday_name_latin,
            tradition=entry.tradition,
            variants=list(entry.variants),
            latin_forms=list(entry.latin_forms),
            is_movable=entry.is_movable,
        )


class SearchResult(BaseModel):
    name: str
    date_key: str = Field(..., description='"MM-DD"')
    holiday_name: str


class UpcomingNameDay(BaseModel):
    year: int
    month: int
    day: int
    holiday_name: str
    names: list[str] = Field(default_factory=list)


class ResolvedDate(BaseModel):
    """
    Date of an entry for one year.
    resolved=False means the movable id was missing from the catalogue and
    month/day are the entry's own placeholder values.
    """
    month: int
    day: int
    resolved: bool = True


class NameLookup(BaseModel):
    """Tagged outcome of a name lookup: nothing, exactly one date, or several."""
    kind: Literal["none", "one", "many"]
    results: list[NameDayResult] = Field(default_factory=list)

    @classmethod
    def of(cls, results: list[NameDayResult]) -> "NameLookup":
        if not results:
            return cls(kind="none")
        return cls(kind="one" if len(results) == 1 else "many", results=results)

    @property
    def first(self) -> Optional[NameDayResult]:
        return self.results[0] if self.results else None

    def as_legacy(self) -> Union[NameDayResult, list[NameDayResult], None]:
        """Single record, list of records, or None."""
        if self.kind == "none":
            return None
        if self.kind == "one":
            return self.results[0]
        return self.results
