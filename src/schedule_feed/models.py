"""Pydantic models for the feed inputs and the two output documents.

Inputs are parsed leniently (the four documents are hand-edited JSON with no
schema); the output models fix the key paths the display widget polls, e.g.
children.<id>.clothing.label or week.<Weekday>.children.<id>.clubs_display.
"""

from typing import Any

from pydantic import BaseModel, Field


class ClubEntry(BaseModel):
    """One scheduled club occurrence from club_schedule.json."""

    time: str = ""  # "15:00-16:00"
    participants: list[str] = Field(default_factory=list)  # internal names
    club: str = ""  # Full activity name, e.g. "Creative Art Club"

    @property
    def start(self) -> str:
        return self.time.split("-")[0].strip()

    @property
    def end(self) -> str:
        parts = self.time.split("-")
        return parts[1].strip() if len(parts) > 1 else ""


class FeedInputs(BaseModel):
    """The four input documents, each an empty dict when unavailable."""

    day_config: dict[str, Any] = Field(default_factory=dict)
    club_schedule: dict[str, Any] = Field(default_factory=dict)
    pack_schedule: dict[str, Any] = Field(default_factory=dict)
    overrides: dict[str, Any] = Field(default_factory=dict)


class Clothing(BaseModel):
    code: str | None = None
    label: str = ""


class PackItem(BaseModel):
    code: str
    label: str


class ClubView(BaseModel):
    time: str
    name: str
    short_name: str


class Slot(BaseModel):
    """One of the four fixed display slots; "-" marks an empty field."""

    start: str = "-"
    end: str = "-"
    name: str = "-"


class ChildView(BaseModel):
    """Everything the widget shows for one participant on one day."""

    clothing: Clothing
    pack: list[PackItem]
    dropoff: str
    pickup: str
    clubs: list[ClubView]
    pack_display: str
    pack_line: str
    pack_items: list[str]
    pack_item1: str
    pack_item2: str
    pack_item3: str
    clubs_display: list[Slot]
    drop_display: str
    pick_display: str


class DayRecord(BaseModel):
    day: str  # "Monday"
    date: str  # "2024-07-22"
    date_number: str  # "22"
    date_suffix: str  # "nd"
    date_month: str  # "Jul"
    children: dict[str, ChildView]


class FeedDocuments(BaseModel):
    """The two documents written per run, already override-merged."""

    today: dict[str, Any]
    week: dict[str, Any]
