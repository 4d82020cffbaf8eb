"""Built-in dictionaries and default times for the day builder.

Held in one frozen model so a DayBuilder can be handed an alternative set
without touching module state.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Anonymized IDs -> internal names used as keys in the input documents.
# Real names only live in the display canvas, never in generated JSON.
PARTICIPANTS: dict[str, str] = {"C1": "C1", "C2": "C2"}

CLOTHING_LABELS: dict[str, str] = {
    "uniform": "Uniform",
    "pe_kit": "PE Kit",
    "own_clothes": "Own Clothes",
    "test_wear": "Test Wear",
}

SNACK_CODE = "snack"

PACK_LABELS: dict[str, str] = {
    "long1": "Library books.",
    "long2": "Sports kit bag",
    "long3": "Water bottle",
    SNACK_CODE: "Snack",
}

DEFAULT_DROPOFF: dict[str, str] = {"C1": "07:45", "C2": "07:45"}
DEFAULT_PICKUP: dict[str, str] = {"C1": "17:30", "C2": "17:30"}

# Full club name (qualifiers removed) -> name that fits a display slot
CLUB_ABBREVIATIONS: dict[str, str] = {
    "Creative Art Club": "Art",
    "Breakfast Club": "Breakfast",
    "Chess Club": "Chess",
    "Choir": "Choir",
    "Coding Club": "Coding",
    "Drama Club": "Drama",
    "Football Club": "Football",
    "Gymnastics Club": "Gym",
    "Homework Club": "Homework",
    "Multi-Sports Club": "Multi-sports",
    "Netball Club": "Netball",
    "Science Club": "Science",
    "Swimming Lessons": "Swim",
}


def _synthetic_clubs(names: list[str]) -> list[dict[str, Any]]:
    return [
        {"time": "07:30-08:30", "participants": names, "club": "Morning Club (Test Long Name)"},
        {"time": "12:15-13:00", "participants": names, "club": "Lunch Activity (Test Long Name)"},
        {"time": "15:00-16:00", "participants": names, "club": "Afternoon Club (Test Long Name)"},
        {"time": "17:30-18:30", "participants": names, "club": "After School Activity (Test Long Name)"},
    ]


class FeedDefaults(BaseModel):
    """Label dictionaries, default times and club abbreviations for a DayBuilder.

    Frozen: fields cannot be reassigned after construction.
    """

    model_config = ConfigDict(frozen=True)

    participants: dict[str, str] = Field(default_factory=lambda: dict(PARTICIPANTS))
    clothing_labels: dict[str, str] = Field(default_factory=lambda: dict(CLOTHING_LABELS))
    pack_labels: dict[str, str] = Field(default_factory=lambda: dict(PACK_LABELS))
    dropoff: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_DROPOFF))
    pickup: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_PICKUP))
    club_abbreviations: dict[str, str] = Field(default_factory=lambda: dict(CLUB_ABBREVIATIONS))

    def synthetic_day_rules(self) -> dict[str, Any]:
        """Full stand-in rules for a weekday missing from day_config.json.

        Used by the "synthetic" missing-day policy. The "_clubs" list is only
        shown when the club schedule has nothing for that weekday.
        """
        names = list(self.participants.values())
        return {
            "clothing": {name: "uniform" for name in names},
            "pack": {name: ["long1", "long2", "long3"] for name in names},
            "dropoff": {name: "07:45" for name in names},
            "pickup": {name: "17:30" for name in names},
            "_clubs": _synthetic_clubs(names),
        }
