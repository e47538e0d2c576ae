"""Tests for the Monge-Elkan composite metric."""

import pytest

import fuzzymetrics as fm
from fuzzymetrics.tokenizers import QGram2Tokenizer


class TestMongeElkan:
    """Tests for MongeElkan token matching."""

    def test_identical(self):
        assert fm.MongeElkan().similarity("hello world", "hello world") == 1.0

    def test_asymmetric(self):
        """Each token of the first string looks for its best partner in the second."""
        me = fm.MongeElkan()
        assert me.similarity("hello", "hello world") == 1.0
        assert me.similarity("hello world", "hello") < 1.0

    def test_inner_metric_injection(self):
        me = fm.MongeElkan(inner=fm.Levenshtein())
        # jon/john scores 0.75, smith/smith scores 1.0
        assert me.similarity("jon smith", "john smith") == pytest.approx(0.875)

    def test_default_inner(self):
        assert isinstance(fm.MongeElkan().inner, fm.SmithWatermanGotoh)

    def test_empty_first_string(self):
        assert fm.MongeElkan().similarity("", "hello") == 0.0
        assert fm.MongeElkan().similarity("", "") == 0.0

    def test_empty_second_string(self):
        assert fm.MongeElkan().similarity("hello", "") == 0.0

    def test_none(self):
        assert fm.MongeElkan().similarity(None, "hello") == 0.0
        assert fm.MongeElkan().similarity("hello", None) == 0.0

    def test_custom_tokenizer(self):
        me = fm.MongeElkan(tokenizer=QGram2Tokenizer(), inner=fm.Levenshtein())
        assert me.similarity("ab", "abab") == 1.0

    def test_unnormalized_equals_similarity(self):
        me = fm.MongeElkan()
        assert me.unnormalized_similarity("jon smith", "john smith") == me.similarity("jon smith", "john smith")

    def test_properties_are_read_only(self):
        me = fm.MongeElkan()
        with pytest.raises(AttributeError):
            me.inner = fm.Jaro()

    def test_estimated_cost(self):
        expected = ((2 + 2) * 2 + (2 + 2) * 2) * 3.4400001e-02
        assert fm.MongeElkan().estimated_cost("a b", "c d") == pytest.approx(expected)
