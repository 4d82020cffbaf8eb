"""Shared fixtures: a small two-participant dataset and a builder."""

import json
import os
import time

import pytest

from schedule_feed import config as config_module
from schedule_feed.day_builder import DayBuilder
from schedule_feed.models import FeedInputs


@pytest.fixture
def day_config():
    return {
        "meta": {"clothing_labels": {"test_wear": "Test Wear (dataset)"}},
        "days": {
            "Monday": {
                "clothing": {"C1": "uniform", "C2": "test_wear"},
                "pack": {"C1": ["long1", "long2"], "C2": ["long3"]},
                "dropoff": {"C1": "08:15", "C2": "08:30"},
                "pickup": {"C2": "17:45"},
            },
            "Wednesday": {
                "clothing": {"C1": "uniform", "C2": "uniform"},
                "pack": {"C1": ["long1"], "C2": []},
                "dropoff": {"C1": "08:15", "C2": "08:15"},
                "pickup": {"C1": "17:30", "C2": "17:30"},
            },
        },
    }


@pytest.fixture
def club_schedule():
    return {
        "clubs": {
            "Monday": [
                {"time": "15:00-16:00", "participants": ["C1"], "club": "Creative Art Club"},
            ],
            "Saturday": [
                {"time": "09:00-10:00", "participants": ["C1", "C2"], "club": "Swimming Lessons"},
            ],
        }
    }


@pytest.fixture
def inputs(day_config, club_schedule):
    return FeedInputs(day_config=day_config, club_schedule=club_schedule)


@pytest.fixture
def builder():
    return DayBuilder()


@pytest.fixture
def input_dir(tmp_path, day_config, club_schedule):
    """The fixture dataset written to disk, with one override for 2024-07-22."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "day_config.json").write_text(json.dumps(day_config))
    (directory / "club_schedule.json").write_text(json.dumps(club_schedule))
    (directory / "pack_schedule.json").write_text(json.dumps({"pack": {}}))
    (directory / "overrides.json").write_text(
        json.dumps({"by_date": {"2024-07-22": {"children": {"C1": {"pickup": "16:45"}}}}})
    )
    return directory


@pytest.fixture
def fresh_config(monkeypatch, tmp_path):
    """Reset the config singleton and keep stray .env files out of the way."""
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.chdir(tmp_path)
    yield
    config_module._config = None


@pytest.fixture
def london_tz():
    """Run in Europe/London local time (BST starts 2024-03-31)."""
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "Europe/London"
    time.tzset()
    yield
    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()
