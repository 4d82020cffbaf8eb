"""
Tests for tolerant input loading.
"""

import json

from schedule_feed.config import FeedConfig
from schedule_feed.loader import load_inputs, read_json_safe, section


class TestReadJsonSafe:
    """Test graceful degradation on bad inputs."""

    def test_reads_object(self, tmp_path):
        path = tmp_path / "day_config.json"
        path.write_text(json.dumps({"days": {"Monday": {}}}))

        assert read_json_safe(path) == {"days": {"Monday": {}}}

    def test_missing_file(self, tmp_path):
        assert read_json_safe(tmp_path / "nope.json") == {}

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "overrides.json"
        path.write_text('{"by_date": {')

        assert read_json_safe(path) == {}

    def test_non_object_document(self, tmp_path):
        path = tmp_path / "club_schedule.json"
        path.write_text("[1, 2, 3]")

        assert read_json_safe(path) == {}

    def test_directory_instead_of_file(self, tmp_path):
        assert read_json_safe(tmp_path) == {}


class TestLoadInputs:
    """Test loading all four documents from a config."""

    def test_all_present(self, input_dir):
        inputs = load_inputs(FeedConfig(input_dir=str(input_dir)))

        assert "Monday" in inputs.day_config["days"]
        assert "Saturday" in inputs.club_schedule["clubs"]
        assert inputs.pack_schedule == {"pack": {}}
        assert "2024-07-22" in inputs.overrides["by_date"]

    def test_missing_overrides_and_pack(self, input_dir):
        (input_dir / "overrides.json").unlink()
        (input_dir / "pack_schedule.json").write_text("not json")

        inputs = load_inputs(FeedConfig(input_dir=str(input_dir)))

        assert inputs.overrides == {}
        assert inputs.pack_schedule == {}
        assert inputs.day_config["days"]

    def test_empty_directory(self, tmp_path):
        inputs = load_inputs(FeedConfig(input_dir=str(tmp_path)))
        assert inputs.model_dump() == {
            "day_config": {},
            "club_schedule": {},
            "pack_schedule": {},
            "overrides": {},
        }


class TestSection:
    def test_wrong_type_is_empty(self):
        assert section({"days": ["Monday"]}, "days") == {}
        assert section(None, "days") == {}
