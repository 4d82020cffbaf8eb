"""Load -> build -> override -> write, once per run."""

from datetime import date
from pathlib import Path

from schedule_feed.config import FeedConfig
from schedule_feed.dates import (
    iso_date,
    local_day,
    monday_of,
    resolve_target_date,
    weekday_name,
)
from schedule_feed.day_builder import DayBuilder
from schedule_feed.loader import load_inputs
from schedule_feed.logging import get_logger
from schedule_feed.models import FeedDocuments, FeedInputs
from schedule_feed.overrides import apply_overrides
from schedule_feed.week_builder import build_week
from schedule_feed.writer import write_feed

log = get_logger(__name__)


def build_feed(inputs: FeedInputs, target: date, builder: DayBuilder) -> FeedDocuments:
    """Build today's record and the week around `target`, overrides applied.

    Pure: reads nothing from disk and writes nothing.
    """
    target = local_day(target)
    today_iso = iso_date(target)
    today_name = weekday_name(target)

    today_base = builder.build_day(today_name, today_iso, inputs).model_dump()
    today = apply_overrides(today_base, inputs.overrides)

    week_base = build_week(monday_of(target), inputs, builder)
    week = {
        day_name: apply_overrides(record.model_dump(), inputs.overrides)
        for day_name, record in week_base["week"].items()
    }

    return FeedDocuments(
        today=today,
        week={"week_order": week_base["week_order"], "week": week},
    )


def run(config: FeedConfig, date_value: str | None = None) -> tuple[Path, Path]:
    """Run the whole pipeline and write both outputs.

    Args:
        config: Paths and builder settings.
        date_value: Raw --date value; absent or invalid means today.

    Returns:
        Paths of the written today and week documents.

    Raises:
        FeedWriteError: If the outputs cannot be written.
    """
    inputs = load_inputs(config)
    target = resolve_target_date(date_value)
    builder = DayBuilder(missing_day_policy=config.missing_day_policy)

    log.info(
        "feed_build_started",
        date=iso_date(target),
        day=weekday_name(target),
        policy=config.missing_day_policy,
    )
    documents = build_feed(inputs, target, builder)

    return write_feed(
        documents.today,
        documents.week,
        config.output_dir,
        today_name=config.today_file,
        week_name=config.week_file,
    )
