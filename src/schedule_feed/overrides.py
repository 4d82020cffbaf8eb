"""Date-keyed overrides applied on top of built day records.

overrides.json looks like:

    {"by_date": {"2024-07-22": {"children": {"C1": {"pickup": "17:30"}}}}}

Objects merge key by key; lists and scalars replace the base value whole.
"""

import copy
from collections.abc import Mapping
from typing import Any

from schedule_feed.loader import section
from schedule_feed.logging import get_logger

log = get_logger(__name__)


def deep_merge(base: Mapping[str, Any], fragment: Mapping[str, Any] | None) -> Any:
    """Merge `fragment` onto `base` without touching either.

    Args:
        base: The built record.
        fragment: Partial tree to apply. None or {} returns a copy of `base`.

    Returns:
        A new tree. Keys only in `base` are kept; a list in `fragment`
        replaces the base list rather than being spliced into it.
    """
    if not fragment:
        return copy.deepcopy(base)

    merged = copy.deepcopy(dict(base))
    for key, value in fragment.items():
        if isinstance(value, Mapping):
            current = merged.get(key)
            merged[key] = deep_merge(current if isinstance(current, Mapping) else {}, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def overrides_for(overrides: dict[str, Any], iso_date: str) -> dict[str, Any] | None:
    fragment = section(overrides, "by_date").get(iso_date)
    if fragment is None:
        return None
    if not isinstance(fragment, dict):
        log.warning("override_ignored", date=iso_date, reason="not an object")
        return None
    return fragment


def apply_overrides(record: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Apply by_date[record["date"]] from the overrides document, if any."""
    fragment = overrides_for(overrides, record.get("date", ""))
    if fragment:
        log.info("override_applied", date=record.get("date"), keys=sorted(fragment))
    return deep_merge(record, fragment)
