"""Tests for the dynamic-programming alignment metrics."""

import sys

import pytest

import fuzzymetrics as fm
from fuzzymetrics.costs import AffineGapOneThird, BinaryCost, BipolarCost, PhoneticCost


class TestLevenshtein:
    """Tests for Levenshtein distance and similarity."""

    def test_kitten_sitting(self):
        assert fm.Levenshtein().unnormalized_similarity("kitten", "sitting") == 3
        assert fm.Levenshtein().similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("", "", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("abc", "abc", 0),
            ("abc", "abd", 1),
            ("abc", "acb", 2),
            ("saturday", "sunday", 3),
        ],
    )
    def test_distances(self, a, b, expected):
        assert fm.Levenshtein().unnormalized_similarity(a, b) == expected

    def test_empty_policy(self):
        """Two empty strings are identical; one empty string matches nothing."""
        assert fm.Levenshtein().similarity("", "") == 1.0
        assert fm.Levenshtein().similarity("", "abc") == 0.0

    def test_default_cost(self):
        assert isinstance(fm.Levenshtein().cost, BinaryCost)
        assert fm.Levenshtein().gap_cost == 1.0

    def test_estimated_cost(self):
        assert fm.Levenshtein().estimated_cost("abc", "ab") == pytest.approx(6 * 1.8e-04)


class TestNeedlemanWunsch:
    """Tests for NeedlemanWunsch global alignment."""

    def test_defaults(self):
        metric = fm.NeedlemanWunsch()
        assert metric.gap_cost == 2.0
        assert isinstance(metric.cost, BinaryCost)

    def test_substitution_preferred_over_gaps(self):
        assert fm.NeedlemanWunsch().unnormalized_similarity("abc", "abd") == 1.0
        assert fm.NeedlemanWunsch().similarity("abc", "abd") == pytest.approx(1 - 1 / 6)

    def test_gaps(self):
        assert fm.NeedlemanWunsch().unnormalized_similarity("abcd", "abc") == 2.0
        assert fm.NeedlemanWunsch().unnormalized_similarity("", "ab") == 2.0

    def test_empty_policy(self):
        """An empty string is as far from another string as that string is long."""
        assert fm.NeedlemanWunsch().similarity("", "") == 1.0
        assert fm.NeedlemanWunsch().unnormalized_similarity("", "abc") == 3.0
        assert fm.NeedlemanWunsch().unnormalized_similarity("abc", "") == 3.0
        assert fm.NeedlemanWunsch().similarity("", "ab") == pytest.approx(0.5)

    def test_boundary_counts_characters_not_gaps(self):
        # one substitution then two steps along the first row
        assert fm.NeedlemanWunsch().unnormalized_similarity("a", "bcd") == 3.0
        assert fm.NeedlemanWunsch().similarity("a", "bcd") == pytest.approx(0.5)
        assert fm.NeedlemanWunsch(gap_cost=5.0).unnormalized_similarity("", "abcd") == 4.0

    def test_gap_cost_is_configurable(self):
        cheap = fm.NeedlemanWunsch(gap_cost=0.5)
        assert cheap.unnormalized_similarity("abc", "abd") == 1.0
        assert cheap.unnormalized_similarity("ab", "abcd") == 1.0

    def test_negative_floor_is_shifted(self):
        """With a negative minimum cost, distance and normalizer are both shifted by the floor."""
        metric = fm.NeedlemanWunsch(gap_cost=1.0, cost=BipolarCost())
        # "a"/"a": cost 1; floor -2 shifts to (1 + 2) / (1 + 2)
        assert metric.similarity("a", "a") == 0.0
        # "a"/"b": cost -2; shifted distance is 0
        assert metric.similarity("a", "b") == 1.0

    def test_estimated_cost(self):
        assert fm.NeedlemanWunsch().estimated_cost("abc", "ab") == pytest.approx(6 * 1.842e-04)


class TestSmithWaterman:
    """Tests for SmithWaterman local alignment."""

    def test_defaults(self):
        metric = fm.SmithWaterman()
        assert metric.gap_cost == 0.5
        assert isinstance(metric.cost, BipolarCost)

    def test_identical(self):
        assert fm.SmithWaterman().unnormalized_similarity("abc", "abc") == 3.0
        assert fm.SmithWaterman().similarity("abc", "abc") == 1.0

    def test_local_alignment(self):
        """The best local region counts; the unmatched tail does not."""
        assert fm.SmithWaterman().unnormalized_similarity("xxabcxx", "abc") == 3.0
        assert fm.SmithWaterman().similarity("xxabcxx", "abc") == 1.0

    def test_gap_inside_alignment(self):
        assert fm.SmithWaterman().unnormalized_similarity("abxcd", "abcd") == 3.5

    def test_disjoint(self):
        assert fm.SmithWaterman().similarity("abc", "xyz") == 0.0

    def test_empty_policy(self):
        assert fm.SmithWaterman().similarity("", "") == 1.0
        assert fm.SmithWaterman().similarity("", "abc") == 0.0
        assert fm.SmithWaterman().unnormalized_similarity("", "abc") == 0.0

    def test_estimated_cost(self):
        assert fm.SmithWaterman().estimated_cost("abc", "ab") == pytest.approx((6 + 3 + 2) * 1.61e-04)


class TestSmithWatermanGotoh:
    """Tests for the affine-gap Smith-Waterman-Gotoh variants."""

    def test_defaults(self):
        metric = fm.SmithWatermanGotoh()
        assert isinstance(metric.cost, PhoneticCost)
        assert metric.gap.max_cost == 5.0
        assert metric.window_size == sys.maxsize
        assert fm.SmithWatermanGotohWindowedAffine().window_size == 100

    def test_identical(self):
        assert fm.SmithWatermanGotoh().unnormalized_similarity("hello", "hello") == 25.0
        assert fm.SmithWatermanGotoh().similarity("hello", "hello") == 1.0

    def test_phonetic_substitution(self):
        # d/t approximate (3) followed by two exact matches (5 + 5)
        assert fm.SmithWatermanGotoh().unnormalized_similarity("dog", "tog") == 13.0
        assert fm.SmithWatermanGotoh().similarity("dog", "tog") == pytest.approx(13 / 15)

    def test_affine_gap(self):
        """'abcxxdef' vs 'abcdef': two runs of three matches joined by a gap of two."""
        score = fm.SmithWatermanGotoh().unnormalized_similarity("abcxxdef", "abcdef")
        assert score == 30.0 - 6.0

    def test_empty_policy(self):
        assert fm.SmithWatermanGotoh().similarity("", "") == 1.0
        assert fm.SmithWatermanGotoh().similarity("abc", "") == 0.0

    @pytest.mark.parametrize(
        "a,b",
        [
            ("hello world", "hallo wrld"),
            ("abcxxdef", "abcdef"),
            ("MARTHA", "MARHTA"),
            ("the quick brown fox", "quick fox"),
        ],
    )
    def test_wide_window_matches_unbounded(self, a, b):
        windowed = fm.SmithWatermanGotohWindowedAffine(window_size=max(len(a), len(b)))
        unbounded = fm.SmithWatermanGotoh()
        assert windowed.unnormalized_similarity(a, b) == unbounded.unnormalized_similarity(a, b)

    def test_narrow_window_never_scores_higher(self):
        a, b = "abcxxxxdef", "abcdef"
        narrow = fm.SmithWatermanGotohWindowedAffine(window_size=1)
        assert narrow.unnormalized_similarity(a, b) <= fm.SmithWatermanGotoh().unnormalized_similarity(a, b)

    def test_custom_costs(self):
        metric = fm.SmithWatermanGotoh(gap=AffineGapOneThird(), cost=BipolarCost())
        assert metric.similarity("abc", "abc") == 1.0
        assert metric.gap.max_cost == 1.0

    def test_invalid_window(self):
        with pytest.raises(fm.ValidationError, match="window_size"):
            fm.SmithWatermanGotohWindowedAffine(window_size=0)

    def test_estimated_cost(self):
        assert fm.SmithWatermanGotoh().estimated_cost("abc", "ab") == pytest.approx((18 + 12) * 2.2e-05)
        windowed = fm.SmithWatermanGotohWindowedAffine(window_size=10)
        assert windowed.estimated_cost("abc", "ab") == pytest.approx(120 * 4.5e-05)
