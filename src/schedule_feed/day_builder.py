"""Day builder: turns the schedule documents into one DayRecord.

For each participant it resolves clothing, pack list and drop-off/pick-up
times, then normalizes the day's clubs into four fixed display slots:

    0 morning       start before 11:00
    1 lunch         11:00 - 13:59
    2 afternoon     14:00 - 16:59
    3 after-school  17:00 onwards

Empty morning/afternoon slots carry the drop-off/pick-up time instead, and a
displayed start in [15:00, 17:00) adds a snack to the pack list.
"""

import re
from datetime import date
from typing import Any, Mapping

from schedule_feed.config import MissingDayPolicy
from schedule_feed.dates import month_short, ordinal_suffix
from schedule_feed.defaults import SNACK_CODE, FeedDefaults
from schedule_feed.labels import LabelSet, first_match
from schedule_feed.loader import section
from schedule_feed.logging import get_logger
from schedule_feed.models import (
    ChildView,
    Clothing,
    ClubEntry,
    ClubView,
    DayRecord,
    FeedInputs,
    PackItem,
    Slot,
)

log = get_logger(__name__)

SLOT_COUNT = 4
MORNING, LUNCH, AFTERNOON, AFTER_SCHOOL = range(SLOT_COUNT)

# Slot boundaries in minutes after midnight
LUNCH_FROM = 11 * 60
AFTERNOON_FROM = 14 * 60
AFTER_SCHOOL_FROM = 17 * 60

SNACK_WINDOW = (15 * 60, 17 * 60)  # [start, end)
PACK_ITEM_SLOTS = 3
BLANK_PACK_ITEM = ""

_SELECTIVE_RE = re.compile(r"\s*\(\s*selective\s*\)", re.IGNORECASE)


def to_minutes(hhmm: str | None) -> int:
    """Minutes after midnight for "HH:MM"; unparseable parts count as 0."""
    parts = (hhmm or "").split(":")

    def _int(part: str) -> int:
        try:
            return int(part)
        except ValueError:
            return 0

    hours = _int(parts[0])
    minutes = _int(parts[1]) if len(parts) > 1 else 0
    return hours * 60 + minutes


def slot_index(start: str) -> int:
    minutes = to_minutes(start)
    if minutes < LUNCH_FROM:
        return MORNING
    if minutes < AFTERNOON_FROM:
        return LUNCH
    if minutes < AFTER_SCHOOL_FROM:
        return AFTERNOON
    return AFTER_SCHOOL


def club_short_name(full_name: str, abbreviations: Mapping[str, str]) -> str:
    """Display name for a club: "(selective)" removed, then abbreviated."""
    cleaned = _SELECTIVE_RE.sub("", full_name).strip()
    return abbreviations.get(cleaned, cleaned)


def assign_slots(clubs: list[ClubView]) -> tuple[list[Slot], list[bool]]:
    """Bucket clubs into the four slots, first seen wins.

    Returns:
        (slots, occupied) where occupied[i] tells whether a club claimed slot i.
    """
    slots = [Slot() for _ in range(SLOT_COUNT)]
    occupied = [False] * SLOT_COUNT
    for club in clubs:
        entry = ClubEntry(time=club.time)
        index = slot_index(entry.start)
        if occupied[index]:
            log.debug("slot_taken", slot=index, club=club.name)
            continue
        slots[index] = Slot(start=entry.start, end=entry.end, name=club.short_name)
        occupied[index] = True
    return slots, occupied


def needs_snack(slots: list[Slot]) -> bool:
    low, high = SNACK_WINDOW
    return any(
        slot.start != "-" and low <= to_minutes(slot.start) < high for slot in slots
    )


def parse_clubs(raw: Any) -> list[ClubEntry]:
    """Club entries for one weekday; entries without a participant list are skipped."""
    if not isinstance(raw, list):
        return []
    entries = []
    for item in raw:
        if not isinstance(item, dict) or not isinstance(item.get("participants"), list):
            continue
        entries.append(
            ClubEntry(
                time=str(item.get("time") or ""),
                participants=[str(p) for p in item["participants"]],
                club=str(item.get("club") or ""),
            )
        )
    return entries


def _rule(rules: dict[str, Any], field: str, name: str) -> Any:
    values = rules.get(field)
    if not isinstance(values, dict):
        return None
    return values.get(name)


class DayBuilder:
    """Builds DayRecords from the schedule documents.

    Args:
        defaults: Label dictionaries, default times, participants and club
            abbreviations. Swap in another FeedDefaults for tests.
        missing_day_policy: "empty" builds a weekday without rules from empty
            rules; "synthetic" substitutes a full stand-in day.
    """

    def __init__(
        self,
        defaults: FeedDefaults | None = None,
        missing_day_policy: MissingDayPolicy = "empty",
    ) -> None:
        self.defaults = defaults or FeedDefaults()
        self.missing_day_policy = missing_day_policy

    def day_rules(self, day_config: dict[str, Any], day_name: str) -> dict[str, Any] | None:
        rules = section(day_config, "days").get(day_name)
        return rules if isinstance(rules, dict) else None

    def build_day(self, day_name: str, iso_date: str, inputs: FeedInputs) -> DayRecord:
        """Build the record for one weekday name + ISO date.

        Args:
            day_name: Weekday name, e.g. "Monday".
            iso_date: Calendar date in YYYY-MM-DD form.
            inputs: The loaded schedule documents.

        Returns:
            DayRecord keyed by anonymized participant id.
        """
        rules = self.day_rules(inputs.day_config, day_name)
        if rules is None:
            log.info("day_rules_missing", day=day_name, policy=self.missing_day_policy)
            if self.missing_day_policy == "synthetic":
                rules = self.defaults.synthetic_day_rules()
            else:
                rules = {}

        labels = LabelSet(
            self.defaults.clothing_labels,
            self.defaults.pack_labels,
            inputs.day_config.get("meta"),
        )
        clubs_today = parse_clubs(section(inputs.club_schedule, "clubs").get(day_name))
        if not clubs_today:
            clubs_today = parse_clubs(rules.get("_clubs"))
        pack_by_day = section(inputs.pack_schedule, "pack").get(day_name)
        if not isinstance(pack_by_day, dict):
            pack_by_day = {}

        children = {}
        for participant_id, name in self.defaults.participants.items():
            children[participant_id] = self._build_child(
                participant_id, name, rules, clubs_today, pack_by_day, labels
            )

        day = date.fromisoformat(iso_date)
        return DayRecord(
            day=day_name,
            date=iso_date,
            date_number=str(day.day),
            date_suffix=ordinal_suffix(day.day),
            date_month=month_short(day),
            children=children,
        )

    def _build_child(
        self,
        participant_id: str,
        name: str,
        rules: dict[str, Any],
        clubs_today: list[ClubEntry],
        pack_by_day: dict[str, Any],
        labels: LabelSet,
    ) -> ChildView:
        clothing_code = _rule(rules, "clothing", name)
        if clothing_code is not None:
            clothing_code = str(clothing_code)

        pack_codes = first_match(
            lambda: pack_by_day.get(name),
            lambda: _rule(rules, "pack", name),
            default=[],
        )
        pack_codes = [str(code) for code in pack_codes] if isinstance(pack_codes, list) else []

        dropoff = first_match(
            lambda: _rule(rules, "dropoff", name),
            lambda: self.defaults.dropoff.get(participant_id),
            default="",
        )
        pickup = first_match(
            lambda: _rule(rules, "pickup", name),
            lambda: self.defaults.pickup.get(participant_id),
            default="",
        )
        dropoff, pickup = str(dropoff), str(pickup)

        clubs = [
            ClubView(
                time=entry.time,
                name=entry.club,
                short_name=club_short_name(entry.club, self.defaults.club_abbreviations),
            )
            for entry in clubs_today
            if name in entry.participants
        ]

        slots, occupied = assign_slots(clubs)
        if not occupied[MORNING] and dropoff:
            slots[MORNING] = slots[MORNING].model_copy(update={"start": dropoff})
        if not occupied[AFTERNOON] and pickup:
            slots[AFTERNOON] = slots[AFTERNOON].model_copy(
                update={"start": pickup, "end": pickup}
            )

        if needs_snack(slots) and SNACK_CODE not in pack_codes:
            pack_codes.append(SNACK_CODE)
            labels.ensure_pack_label(SNACK_CODE, "Snack")

        pack = [PackItem(code=code, label=labels.pack_label(code)) for code in pack_codes]
        pack_labels = [item.label for item in pack]
        pack_display = ", ".join(pack_labels)
        pack_items = (pack_labels + [BLANK_PACK_ITEM] * PACK_ITEM_SLOTS)[:PACK_ITEM_SLOTS]

        return ChildView(
            clothing=Clothing(code=clothing_code, label=labels.clothing_label(clothing_code)),
            pack=pack,
            dropoff=dropoff,
            pickup=pickup,
            clubs=clubs,
            pack_display=pack_display,
            pack_line=pack_display or "-",
            pack_items=pack_items,
            pack_item1=pack_items[0],
            pack_item2=pack_items[1],
            pack_item3=pack_items[2],
            clubs_display=slots,
            drop_display=dropoff,
            pick_display=pickup,
        )
