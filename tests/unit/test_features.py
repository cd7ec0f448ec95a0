"""
Unit tests for core/templating/features.py
"""
import pytest

from core.templating.features import derive_features


class TestDeriveFeatures:
    """Test the sentence-splitting feature heuristic."""

    def test_splits_on_periods(self):
        assert derive_features("Fast. Small. Cheap.") == ["Fast", "Small", "Cheap"]

    def test_strips_and_drops_empty_fragments(self):
        assert derive_features("  One..  Two .  ") == ["One", "Two"]

    def test_single_sentence_without_period(self):
        assert derive_features("Just one feature") == ["Just one feature"]

    @pytest.mark.parametrize("value", [None, "", "...", "  .  "])
    def test_nothing_to_derive(self, value):
        assert derive_features(value) == []
