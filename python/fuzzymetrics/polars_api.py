"""Polars batch API for fuzzy matching on Series.

Functions in This Module
------------------------
- ``batch_similarity()``: Similarity between two aligned Series
- ``batch_best_match()``: Best matching target for each query
- ``match_series()``: Every query/target pair above a threshold, as a DataFrame

Nulls are preserved: a null on either side produces a null score or match
rather than 0.0.

Example Usage
-------------
>>> import polars as pl
>>> import fuzzymetrics as fm
>>>
>>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
>>> df = df.with_columns(score=fm.batch_similarity(df["a"], df["b"]))
>>>
>>> categories = ["Electronics", "Clothing", "Food", "Home"]
>>> raw = pl.Series(["electronic", "clothes", "fod"])
>>> fm.batch_best_match(raw, categories, manipulator=str.lower).to_list()
['Electronics', 'Clothing', 'Food']

Metric Selection Guide
----------------------
+---------------------+------------------+
| Metric              | Best For         |
+=====================+==================+
| jaro_winkler        | Names, short text|
+---------------------+------------------+
| levenshtein         | Typos, OCR errors|
+---------------------+------------------+
| qgrams_distance     | Reordered text   |
+---------------------+------------------+
| monge_elkan         | Multi-word names |
+---------------------+------------------+

See Also
--------
- ``fuzzymetrics.expr``: Polars expression namespace for column operations
- ``fuzzymetrics.batch``: The same operations on plain Python lists
"""

import logging
from typing import Callable, Optional, Sequence, Union

import polars as pl

from fuzzymetrics import batch
from fuzzymetrics._utils import create_metric, normalize_metric
from fuzzymetrics.enums import Metric
from fuzzymetrics.exceptions import ValidationError

logger = logging.getLogger(__name__)

_MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "target_idx": pl.Int64,
    "target": pl.Utf8,
    "score": pl.Float64,
}


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    metric: Union[str, Metric] = "levenshtein",
) -> "pl.Series":
    """
    Compute similarity between two Series element by element.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        metric: Similarity metric to use (string or Metric enum)

    Returns:
        Float64 Series named "similarity" with scores (0.0 to 1.0), null
        wherever either input is null

    Raises:
        ValidationError: If the Series lengths differ

    Example:
        >>> df = pl.DataFrame({"a": ["hello", None], "b": ["hello", "word"]})
        >>> fm.batch_similarity(df["a"], df["b"]).to_list()
        [1.0, None]

    See Also:
        match_series: Match each query against all targets (returns all matches)
        batch_best_match: Find best match from a list of choices
    """
    scorer = create_metric(metric)

    if len(left) != len(right):
        raise ValidationError(f"Series must have equal length, got {len(left)} and {len(right)}")

    scores = [
        None if a is None or b is None else scorer.similarity(str(a), str(b))
        for a, b in zip(left.to_list(), right.to_list())
    ]
    logger.debug("computed %d %s scores", len(scores), scorer.name)
    return pl.Series("similarity", scores, dtype=pl.Float64)


def batch_best_match(
    queries: "pl.Series",
    targets: Sequence[str],
    metric: Union[str, Metric] = "levenshtein",
    min_similarity: float = 0.0,
    manipulator: Optional[Callable[[str], str]] = None,
) -> "pl.Series":
    """
    Find the best matching target for each query.

    Ties go to the last of the equally scored targets.

    Args:
        queries: Series of query strings
        targets: Target strings to match against
        metric: Similarity metric to use (string or Metric enum)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)
        manipulator: Optional function applied to every target before
            scoring, e.g. ``str.lower`` for case-insensitive matching; the
            original target is returned

    Returns:
        Utf8 Series named "best_match" (null for null queries, empty targets,
        or when the best score is below min_similarity)

    See Also:
        batch_similarity: Compute pairwise similarity between aligned Series
        match_series: Match queries against targets with full result details
    """
    metric_name = normalize_metric(metric)
    batch._validate_min_similarity(min_similarity)

    matches = []
    for query in queries.to_list():
        if query is None:
            matches.append(None)
            continue
        best = batch.best_match(str(query), targets, metric=metric_name, manipulator=manipulator)
        if best is None or best.score < min_similarity:
            matches.append(None)
        else:
            matches.append(best.text)

    return pl.Series("best_match", matches, dtype=pl.Utf8)


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    metric: Union[str, Metric] = "levenshtein",
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, keeps every target scoring at least min_similarity. Null
    queries and null targets are skipped.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        metric: Similarity metric to use (string or Metric enum)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = fm.match_series(queries, targets, min_similarity=0.6)
        >>> result["target"].to_list()
        ['appel', 'banan']

    See Also:
        batch_similarity: Compute pairwise similarity between aligned Series
        batch_best_match: Find best match for each query from a target list
    """
    scorer = create_metric(metric)
    queries = query_series.to_list()
    targets = target_series.to_list()

    rows = []
    for query_idx, query in enumerate(queries):
        if query is None:
            continue
        for target_idx, target in enumerate(targets):
            if target is None:
                continue
            score = scorer.similarity(str(query), str(target))
            if score >= min_similarity:
                rows.append(
                    {
                        "query_idx": query_idx,
                        "query": str(query),
                        "target_idx": target_idx,
                        "target": str(target),
                        "score": score,
                    }
                )

    return pl.DataFrame(rows, schema=_MATCH_SCHEMA)


__all__ = ["batch_similarity", "batch_best_match", "match_series"]
