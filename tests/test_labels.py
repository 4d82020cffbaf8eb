"""
Tests for label merging and first-match fallback resolution.
"""

from schedule_feed.defaults import CLOTHING_LABELS, PACK_LABELS
from schedule_feed.labels import LabelSet, first_match, merge_labels


class TestFirstMatch:
    """Test ordered fallback lookups."""

    def test_first_non_none_wins(self):
        assert first_match(lambda: None, lambda: "rule", lambda: "default") == "rule"

    def test_empty_values_count_as_matches(self):
        assert first_match(lambda: [], lambda: ["long1"]) == []
        assert first_match(lambda: "", lambda: "x") == ""

    def test_default_when_nothing_matches(self):
        assert first_match(lambda: None, default=[]) == []

    def test_lookups_are_lazy(self):
        calls = []

        def later():
            calls.append("later")
            return "unused"

        assert first_match(lambda: "first", later) == "first"
        assert calls == []


class TestLabels:
    """Test default and dataset label layering."""

    def test_dataset_wins_on_collision(self):
        merged = merge_labels({"uniform": "Uniform", "pe_kit": "PE Kit"}, {"uniform": "Blazer"})
        assert merged == {"uniform": "Blazer", "pe_kit": "PE Kit"}

    def test_non_mapping_overrides_ignored(self):
        assert merge_labels({"a": "A"}, ["b"]) == {"a": "A"}

    def test_defaults_not_mutated(self):
        labels = LabelSet(CLOTHING_LABELS, PACK_LABELS, {"pack_labels": {"long1": "Books"}})
        labels.ensure_pack_label("extra", "Extra")

        assert labels.pack_label("long1") == "Books"
        assert PACK_LABELS["long1"] == "Library books."
        assert "extra" not in PACK_LABELS

    def test_fallbacks(self):
        labels = LabelSet(CLOTHING_LABELS, PACK_LABELS)

        assert labels.clothing_label("uniform") == "Uniform"
        assert labels.clothing_label("cape") == "cape"
        assert labels.clothing_label(None) == ""
        assert labels.pack_label("mystery") == "mystery"

    def test_ensure_keeps_existing_label(self):
        labels = LabelSet(CLOTHING_LABELS, PACK_LABELS, {"pack_labels": {"snack": "Fruit"}})
        labels.ensure_pack_label("snack", "Snack")
        assert labels.pack_label("snack") == "Fruit"
