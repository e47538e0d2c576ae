"""Batch operations API for fuzzymetrics.

This module provides list-based operations on top of the single-pair
metrics: scoring a query against many candidates, picking the best or worst
candidates, fuzzy containment checks, aligned pairwise scoring and full
similarity matrices. One metric instance is built per call and reused for
every pair.

Example usage:
    >>> import fuzzymetrics.batch as batch

    # Score a query against every candidate, in input order
    >>> results = batch.similarities("helo", ["hello", "hallo", "world"])
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('hello', 0.8), ('hallo', 0.6), ('world', 0.2)]

    # Best candidate
    >>> batch.best_match("appel", ["apple", "apply", "banana"], metric="jaro_winkler").text
    'apple'

    # Does any word of the source resemble the search term?
    >>> batch.contains_fuzzy("The quick brown fox", "quik")
    True
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Iterable, Sequence

from fuzzymetrics._utils import create_metric
from fuzzymetrics.exceptions import ValidationError
from fuzzymetrics.results import MatchResult
from fuzzymetrics.scoring import score_pair

if TYPE_CHECKING:
    from fuzzymetrics.enums import Metric

logger = logging.getLogger(__name__)

Manipulator = Callable[[str], str]

__all__ = [
    "similarities",
    "best_match",
    "best_matches",
    "worst_match",
    "worst_matches",
    "contains_fuzzy",
    "filter_fuzzy",
    "pairwise",
    "similarity_matrix",
]


def _validate_min_similarity(min_similarity: float) -> None:
    if math.isnan(min_similarity) or not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(f"min_similarity must be between 0.0 and 1.0, got {min_similarity}")


def similarities(
    query: str,
    choices: Iterable[str | None],
    metric: str | Metric = "levenshtein",
    as_percentage: bool = False,
    manipulator: Manipulator | None = None,
) -> list[MatchResult]:
    """Compute similarity of a query against every choice.

    Args:
        query: The query string to match.
        choices: Candidate strings. ``None`` candidates score 0.0.
        metric: Similarity metric to use (string or Metric enum). Options
            include "levenshtein" (default), "jaro_winkler", "jaccard",
            "needleman_wunsch", "smith_waterman_gotoh" and "monge_elkan";
            see :class:`~fuzzymetrics.Metric` for the full list.
        as_percentage: Scale scores to ``[0, 100]``.
        manipulator: Optional function applied to every candidate before it
            is scored. Results still carry the original candidate text.

    Returns:
        List of MatchResult objects in the same order as ``choices``.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in ``choices``.

    Raises:
        ValidationError: If ``query`` or ``choices`` is None.
        AlgorithmError: If the metric name is not recognized.
    """
    if query is None or choices is None:
        raise ValidationError("query and choices must not be None")
    scorer = create_metric(metric)
    results = [
        MatchResult(text=choice, score=score_pair(scorer.similarity, query, choice, as_percentage, manipulator), id=i)
        for i, choice in enumerate(choices)
    ]
    logger.debug("scored %d choices with %s", len(results), scorer.name)
    return results


def best_match(
    query: str,
    choices: Iterable[str | None],
    metric: str | Metric = "levenshtein",
    as_percentage: bool = False,
    manipulator: Manipulator | None = None,
) -> MatchResult | None:
    """Find the highest-scoring choice.

    When several choices share the highest score, the last of them wins.

    Returns:
        The best MatchResult, or None when ``choices`` is empty.
    """
    results = similarities(query, choices, metric, as_percentage, manipulator)
    if not results:
        return None
    top = max(r.score for r in results)
    return [r for r in results if r.score == top][-1]


def best_matches(
    query: str,
    choices: Iterable[str | None],
    metric: str | Metric = "levenshtein",
    as_percentage: bool = False,
    manipulator: Manipulator | None = None,
) -> list[MatchResult]:
    """Find every choice tied for the highest score, in input order.

    Example:
        >>> [m.text for m in best_matches("cat", ["bat", "dog", "rat"])]
        ['bat', 'rat']
    """
    results = similarities(query, choices, metric, as_percentage, manipulator)
    if not results:
        return []
    top = max(r.score for r in results)
    return [r for r in results if r.score == top]


def worst_match(
    query: str,
    choices: Iterable[str | None],
    metric: str | Metric = "levenshtein",
    as_percentage: bool = False,
    manipulator: Manipulator | None = None,
) -> MatchResult | None:
    """Find the lowest-scoring choice.

    When several choices share the lowest score, the first of them wins.

    Returns:
        The worst MatchResult, or None when ``choices`` is empty.
    """
    results = similarities(query, choices, metric, as_percentage, manipulator)
    if not results:
        return None
    bottom = min(r.score for r in results)
    return next(r for r in results if r.score == bottom)


def worst_matches(
    query: str,
    choices: Iterable[str | None],
    metric: str | Metric = "levenshtein",
    as_percentage: bool = False,
    manipulator: Manipulator | None = None,
) -> list[MatchResult]:
    """Find every choice tied for the lowest score, in input order."""
    results = similarities(query, choices, metric, as_percentage, manipulator)
    if not results:
        return []
    bottom = min(r.score for r in results)
    return [r for r in results if r.score == bottom]


def contains_fuzzy(
    source: str,
    search: str,
    min_similarity: float = 0.7,
    metric: str | Metric = "levenshtein",
    manipulator: Manipulator | None = None,
) -> bool:
    """Check whether ``source`` contains ``search`` exactly or approximately.

    The checks run in order and stop at the first hit:

    1. ``search`` is a case-insensitive substring of ``source``.
    2. ``source`` is split on single spaces and each word stripped (and
       passed through ``manipulator`` when given); a word equals ``search``
       ignoring case.
    3. A lowercased word scores at least ``min_similarity`` against the
       lowercased ``search``.

    Args:
        source: Text to search in.
        search: Term to look for.
        min_similarity: Minimum word score for a fuzzy hit (default: 0.7).
        metric: Similarity metric to use (string or Metric enum).
        manipulator: Optional function applied to every word of ``source``.

    Returns:
        True if ``source`` contains ``search``.

    Raises:
        ValidationError: If ``search`` is empty, ``source`` or ``search`` is
            None, or ``min_similarity`` is outside ``[0, 1]``.

    Example:
        >>> contains_fuzzy("Order #1234 for Jon Smith", "john")
        True
        >>> contains_fuzzy("Order #1234 for Jon Smith", "invoice")
        False
    """
    if source is None or search is None:
        raise ValidationError("source and search must not be None")
    if not search:
        raise ValidationError("search must not be empty")
    _validate_min_similarity(min_similarity)

    needle = search.lower()
    if needle in source.lower():
        return True

    words = [word.strip() for word in source.split(" ")]
    if manipulator is not None:
        words = [manipulator(word) for word in words]
    if any(word.lower() == needle for word in words):
        return True

    scorer = create_metric(metric)
    return any(scorer.similarity(needle, word.lower()) >= min_similarity for word in words)


def filter_fuzzy(
    sources: Iterable[str],
    search: str,
    min_similarity: float = 0.7,
    metric: str | Metric = "levenshtein",
    manipulator: Manipulator | None = None,
) -> list[str]:
    """Keep the sources that fuzzily contain ``search``.

    ``manipulator`` is applied to each whole source before the check; the
    returned list holds the original sources in input order.

    Example:
        >>> filter_fuzzy(["red apple", "green pear", "aple pie"], "apple")
        ['red apple', 'aple pie']
    """
    if sources is None:
        raise ValidationError("sources must not be None")
    matched = []
    for source in sources:
        data = manipulator(source) if manipulator is not None else source
        if contains_fuzzy(data, search, min_similarity, metric):
            matched.append(source)
    logger.debug("kept %d sources matching %r", len(matched), search)
    return matched


def pairwise(
    left: Sequence[str | None],
    right: Sequence[str | None],
    metric: str | Metric = "levenshtein",
) -> list[float]:
    """Compute similarity for each aligned pair ``(left[i], right[i])``.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        metric: Similarity metric to use (string or Metric enum).

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        ValidationError: If either list is None or the lengths differ.

    Example:
        >>> pairwise(["hello", "world"], ["hello", "word"])
        [1.0, 0.8]
    """
    if left is None or right is None:
        raise ValidationError("left and right must not be None")
    if len(left) != len(right):
        raise ValidationError(f"left and right must have the same length, got {len(left)} and {len(right)}")
    return create_metric(metric).batch_compare_all(left, right)


def similarity_matrix(
    queries: Sequence[str | None],
    choices: Sequence[str | None],
    metric: str | Metric = "levenshtein",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    if queries is None or choices is None:
        raise ValidationError("queries and choices must not be None")
    scorer = create_metric(metric)
    matrix = [[scorer.similarity(query, choice) for choice in choices] for query in queries]
    logger.debug("built %dx%d similarity matrix with %s", len(queries), len(choices), scorer.name)
    return matrix
