"""
Edge case tests for fuzzymetrics.

Tests cover:
- Null/None handling
- Empty strings
- Long strings
- Unicode edge cases (combining chars, emoji, CJK)
- Adversarial inputs (repeated patterns)
- Whitespace and special characters
"""

import pytest

import fuzzymetrics as fm
from fuzzymetrics._utils import create_metric

ALL_METRICS = [m.value for m in fm.Metric]


class TestNullNoneHandling:
    """Tests for null/None input handling."""

    @pytest.mark.parametrize("metric_name", ALL_METRICS)
    def test_none_scores_zero(self, metric_name):
        """None input never raises and scores 0.0."""
        metric = create_metric(metric_name)
        assert metric.similarity(None, "hello") == 0.0
        assert metric.similarity("hello", None) == 0.0
        assert metric.unnormalized_similarity(None, None) == 0.0

    def test_batch_compare_none_elements(self):
        """None elements inside a batch score 0.0."""
        assert fm.Jaro().batch_compare(["hello", None], "hello") == [1.0, 0.0]


class TestEmptyStrings:
    """Tests for empty string handling."""

    def test_levenshtein_empty_empty(self):
        """Empty strings should have distance 0 and similarity 1.0."""
        assert fm.Levenshtein().unnormalized_similarity("", "") == 0
        assert fm.Levenshtein().similarity("", "") == 1.0

    def test_levenshtein_empty_nonempty(self):
        """Empty vs non-empty should equal length of non-empty."""
        assert fm.Levenshtein().unnormalized_similarity("", "hello") == 5
        assert fm.Levenshtein().unnormalized_similarity("hello", "") == 5

    def test_jaro_winkler_empty(self):
        """Jaro-Winkler has no characters to match on empty input."""
        assert fm.JaroWinkler().similarity("", "") == 0.0
        assert fm.JaroWinkler().similarity("", "hello") == 0.0

    def test_qgrams_empty_pair_pads(self):
        """Padding gives empty strings a gram, so two empty strings match."""
        assert fm.QGramsDistance().similarity("", "") == 1.0

    @pytest.mark.parametrize("metric_name", ALL_METRICS)
    def test_empty_vs_nonempty_in_bounds(self, metric_name):
        score = create_metric(metric_name).similarity("", "hello")
        assert 0.0 <= score <= 1.0


class TestLongStrings:
    """Tests for long inputs."""

    def test_levenshtein_long(self):
        a = "a" * 400
        b = "a" * 399 + "b"
        assert fm.Levenshtein().unnormalized_similarity(a, b) == 1
        assert fm.Levenshtein().similarity(a, b) == pytest.approx(1 - 1 / 400)

    def test_jaro_long_identical(self):
        s = "abcdefghij" * 50
        assert fm.Jaro().similarity(s, s) == 1.0

    def test_token_metrics_long(self):
        a = " ".join(f"word{i}" for i in range(1000))
        b = " ".join(f"word{i}" for i in range(500, 1500))
        assert fm.JaccardSimilarity().similarity(a, b) == pytest.approx(500 / 1500)

    def test_chapman_mean_length_saturates(self):
        assert fm.ChapmanMeanLength().similarity("a" * 1000, "b") == 1.0


class TestUnicode:
    """Unicode input is compared code point by code point."""

    def test_accents(self):
        assert fm.Levenshtein().unnormalized_similarity("café", "cafe") == 1

    def test_combining_characters(self):
        """A combining accent is its own code point."""
        assert fm.Levenshtein().unnormalized_similarity("café", "cafe") == 1

    def test_emoji(self):
        assert fm.Levenshtein().similarity("hello 👋", "hello 👋") == 1.0
        assert fm.Levenshtein().unnormalized_similarity("👋🌍", "👋") == 1

    def test_cjk(self):
        assert fm.Jaro().similarity("東京都", "東京都") == 1.0
        assert fm.JaccardSimilarity().similarity("東京 大阪", "東京 京都") == pytest.approx(1 / 3)

    def test_phonetic_cost_non_ascii(self):
        """Characters outside the phonetic groups are plain mismatches."""
        assert fm.SmithWatermanGotoh().similarity("ß", "s") == 0.0

    @pytest.mark.parametrize("metric_name", ALL_METRICS)
    def test_all_metrics_unicode(self, metric_name):
        score = create_metric(metric_name).similarity("naïve café", "naive cafe")
        assert 0.0 <= score <= 1.0


class TestAdversarialInputs:
    """Repeated patterns and degenerate alphabets."""

    def test_repeated_characters(self):
        assert fm.Levenshtein().unnormalized_similarity("aaaa", "aaaaaaaa") == 4
        assert fm.MatchingCoefficient().similarity("a a a a", "a a") == 0.5

    def test_repeated_pattern_jaro(self):
        assert 0.0 < fm.Jaro().similarity("abababab", "babababa") < 1.0

    def test_single_characters(self):
        assert fm.SmithWaterman().similarity("a", "a") == 1.0
        assert fm.SmithWaterman().similarity("a", "b") == 0.0


class TestWhitespace:
    """Whitespace-only and oddly spaced input."""

    @pytest.mark.parametrize("metric_name", ALL_METRICS)
    def test_whitespace_only(self, metric_name):
        score = create_metric(metric_name).similarity("   ", "\t\n")
        assert 0.0 <= score <= 1.0

    def test_tokenizer_keeps_empty_terms(self):
        """Consecutive delimiters produce empty tokens, so spacing affects token metrics."""
        assert fm.JaccardSimilarity().similarity("a b", "a  b") < 1.0

    def test_special_characters(self):
        assert fm.Levenshtein().similarity("a-b_c.d", "a-b_c.d") == 1.0
        assert fm.Levenshtein().unnormalized_similarity("foo@bar.com", "foo@baz.com") == 1
