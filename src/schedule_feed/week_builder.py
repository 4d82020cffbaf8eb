"""Week builder: seven days from a Monday, skipping weekdays without rules."""

from datetime import date, timedelta
from typing import Any

from schedule_feed.dates import iso_date, weekday_name
from schedule_feed.day_builder import DayBuilder
from schedule_feed.logging import get_logger
from schedule_feed.models import DayRecord, FeedInputs

log = get_logger(__name__)


def build_week(monday: date, inputs: FeedInputs, builder: DayBuilder) -> dict[str, Any]:
    """Build the week starting at `monday` (inclusive).

    Only weekdays with an entry under days.<Weekday> in the day config are
    built, even when clubs or pack data exist for the others.

    Returns:
        {"week_order": [weekday names, chronological], "week": {name: DayRecord}}
    """
    week: dict[str, DayRecord] = {}
    for offset in range(7):
        day = monday + timedelta(days=offset)
        day_name = weekday_name(day)
        if builder.day_rules(inputs.day_config, day_name) is None:
            log.debug("week_day_skipped", day=day_name)
            continue
        week[day_name] = builder.build_day(day_name, iso_date(day), inputs)

    return {"week_order": list(week), "week": week}
