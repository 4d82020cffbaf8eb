"""Target-date resolution and calendar helpers.

Weekday and month names are fixed English tables so output doesn't depend on
the process locale.
"""

from datetime import date, datetime, timedelta

from schedule_feed.logging import get_logger

log = get_logger(__name__)

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES_SHORT = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def resolve_target_date(value: str | None, now: datetime | None = None) -> datetime:
    """Pick the date to build for.

    Args:
        value: Raw --date value (ISO date or datetime). None or "" means now.
        now: Fallback time; defaults to the current local time.

    Returns:
        The parsed value, or `now` when it is absent or invalid. An invalid
        value logs a warning; it never aborts the run.
    """
    fallback = now if now is not None else datetime.now()
    if not value:
        return fallback

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        log.warning(
            "invalid_date_argument",
            value=value,
            fallback=iso_date(fallback),
        )
        return fallback

    # Aware values become naive local time so calendar maths never runs in a
    # frozen UTC offset
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def local_day(d: date) -> date:
    """Local calendar day of `d`; aware datetimes are moved to local time first."""
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone()
        return d.date()
    return d


def iso_date(d: date) -> str:
    """YYYY-MM-DD of the local calendar day of `d`."""
    return local_day(d).isoformat()


def weekday_name(d: date) -> str:
    return WEEKDAY_NAMES[local_day(d).weekday()]


def month_short(d: date) -> str:
    return MONTH_NAMES_SHORT[local_day(d).month - 1]


def monday_of(d: date) -> date:
    """Monday that starts the week containing `d`.

    Sunday belongs to the week that started six days earlier. Datetimes come
    back with the time-of-day zeroed; aware ones are read in local time.
    """
    if isinstance(d, datetime) and d.tzinfo is not None:
        d = d.astimezone().replace(tzinfo=None)
    weekday_index = (d.weekday() + 1) % 7  # Sunday=0
    days_back = 6 if weekday_index == 0 else weekday_index - 1
    monday = d - timedelta(days=days_back)
    if isinstance(monday, datetime):
        monday = monday.replace(hour=0, minute=0, second=0, microsecond=0)
    return monday


def ordinal_suffix(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
