"""Build today.json and week.json for the display widget.

Run with: build-feed
For a date: build-feed --date=2024-07-22
Stand-in data for days without rules: build-feed --missing-day synthetic

Exit codes:
  0 = success (both files written)
  1 = error (message on stderr)
"""

import argparse
import sys

from schedule_feed.config import get_config
from schedule_feed.errors import FeedError
from schedule_feed.logging import get_logger, setup_logging
from schedule_feed.pipeline import run

log = get_logger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description="Build the daily/weekly schedule feed.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Target date as YYYY-MM-DD (default: today). Invalid values fall back to today.",
    )
    parser.add_argument(
        "--input-dir",
        type=str,
        default=None,
        help="Directory with day_config.json, club_schedule.json, pack_schedule.json, overrides.json.",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write today.json and week.json into.",
    )
    parser.add_argument(
        "--missing-day",
        choices=["empty", "synthetic"],
        default=None,
        help="How to build a weekday missing from the day rules.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    config = get_config()
    updates = {
        "input_dir": args.input_dir,
        "output_dir": args.output_dir,
        "missing_day_policy": args.missing_day,
    }
    config = config.model_copy(update={k: v for k, v in updates.items() if v is not None})

    setup_logging(json_output=config.log_json, log_level=config.log_level)

    try:
        today_path, week_path = run(config, args.date)
    except (FeedError, OSError) as e:
        log.error("build_feed_failed", error=str(e))
        return 1

    log.info("build_feed_done", today=str(today_path), week=str(week_path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
