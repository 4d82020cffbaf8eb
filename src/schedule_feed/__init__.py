"""Schedule feed builder for the home information display.

Merges the recurring weekday rules, club schedule, pack schedule and
date-keyed overrides into today.json and week.json.
"""

from schedule_feed.day_builder import DayBuilder
from schedule_feed.defaults import FeedDefaults
from schedule_feed.models import DayRecord, FeedDocuments, FeedInputs
from schedule_feed.overrides import apply_overrides, deep_merge
from schedule_feed.pipeline import build_feed, run
from schedule_feed.week_builder import build_week

__all__ = [
    "DayBuilder",
    "FeedDefaults",
    "DayRecord",
    "FeedDocuments",
    "FeedInputs",
    "apply_overrides",
    "deep_merge",
    "build_feed",
    "build_week",
    "run",
]
