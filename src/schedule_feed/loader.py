"""Tolerant readers for the four input documents.

A missing or broken input never aborts a run: it reads as an empty document,
and the builder degrades to whatever the remaining inputs provide.
"""

import json
from pathlib import Path
from typing import Any

from schedule_feed.config import FeedConfig
from schedule_feed.logging import get_logger
from schedule_feed.models import FeedInputs

log = get_logger(__name__)


def read_json_safe(path: str | Path) -> dict[str, Any]:
    """Parse a JSON object from disk, or return {} on any read/parse failure.

    Args:
        path: File to read.

    Returns:
        The parsed object. Missing files, unreadable files, malformed JSON and
        top-level values that aren't objects all yield an empty dict.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.debug("input_unavailable", path=str(path), error=str(e))
        return {}

    if not isinstance(data, dict):
        log.debug("input_unavailable", path=str(path), error="not a JSON object")
        return {}
    return data


def load_inputs(config: FeedConfig) -> FeedInputs:
    """Read day rules, club schedule, pack schedule and overrides."""
    inputs = FeedInputs(
        day_config=read_json_safe(config.day_config_path),
        club_schedule=read_json_safe(config.club_schedule_path),
        pack_schedule=read_json_safe(config.pack_schedule_path),
        overrides=read_json_safe(config.overrides_path),
    )
    log.info(
        "inputs_loaded",
        input_dir=config.input_dir,
        days=len(section(inputs.day_config, "days")),
        club_days=len(section(inputs.club_schedule, "clubs")),
        override_dates=len(section(inputs.overrides, "by_date")),
    )
    return inputs


def section(doc: Any, key: str) -> dict[str, Any]:
    """Return doc[key] if it is an object, else {}."""
    if not isinstance(doc, dict):
        return {}
    value = doc.get(key)
    return value if isinstance(value, dict) else {}
