"""Single-pair scoring by metric name.

Example:
    >>> from fuzzymetrics.scoring import similarity
    >>> round(similarity("kitten", "sitting", metric="levenshtein", as_percentage=True), 2)
    57.14
    >>> similarity("hello", "HELLO", manipulator=str.lower)
    1.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from fuzzymetrics._utils import create_metric

if TYPE_CHECKING:
    from fuzzymetrics.enums import Metric

Manipulator = Callable[[str], str]


def similarity(
    first: str | None,
    second: str | None,
    metric: str | Metric = "levenshtein",
    as_percentage: bool = False,
    manipulator: Manipulator | None = None,
) -> float:
    """Compute the normalized similarity of two strings.

    Args:
        first: First string. ``None`` scores 0.0.
        second: Second string. ``None`` scores 0.0.
        metric: Metric to use (string or Metric enum), Levenshtein by default.
        as_percentage: Return the score multiplied by 100.
        manipulator: Optional function applied to ``second`` before scoring,
            e.g. ``str.lower``.

    Returns:
        Similarity score between 0.0 and 1.0 (or 0 and 100).

    Raises:
        AlgorithmError: If the metric name is not recognized.
        TypeError: If metric is not a string or Metric enum.
    """
    scorer = create_metric(metric)
    return score_pair(scorer.similarity, first, second, as_percentage, manipulator)


def unnormalized_similarity(
    first: str | None,
    second: str | None,
    metric: str | Metric = "levenshtein",
    manipulator: Manipulator | None = None,
) -> float:
    """Compute the raw metric output for two strings.

    For distance metrics such as Levenshtein this is the distance itself.

    Example:
        >>> unnormalized_similarity("kitten", "sitting")
        3.0
    """
    scorer = create_metric(metric)
    return score_pair(scorer.unnormalized_similarity, first, second, False, manipulator)


def score_pair(
    scorer: Callable[[str | None, str | None], float],
    first: str | None,
    second: str | None,
    as_percentage: bool = False,
    manipulator: Manipulator | None = None,
) -> float:
    if manipulator is not None and second is not None:
        second = manipulator(second)
    score = scorer(first, second)
    return score * 100.0 if as_percentage else score


__all__ = ["similarity", "unnormalized_similarity", "score_pair"]
