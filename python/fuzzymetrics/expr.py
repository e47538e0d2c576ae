"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling chainable fuzzy matching operations directly in Polars
expression contexts. Every metric of the package is available by name.

Warning:
    Scores are computed row by row through ``map_elements``. For large
    datasets consider the batch API (``fm.batch_similarity()``,
    ``fm.batch_best_match()``).

Example:
    >>> import polars as pl
    >>> import fuzzymetrics  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").fuzzy.is_similar("John", min_similarity=0.7)
    ... )
"""

from typing import Sequence, Union

import polars as pl

from fuzzymetrics import batch
from fuzzymetrics._utils import create_metric, normalize_metric
from fuzzymetrics.enums import Metric


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        metric: Union[str, Metric] = "levenshtein",
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Null values on either side produce a null score.

        Args:
            other: String literal or column expression to compare against
            metric: Similarity metric to use (string or Metric enum)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"), metric="jaro_winkler")
            ... )
        """
        sim_func = create_metric(metric).similarity

        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: sim_func(str(s), other),
                return_dtype=pl.Float64,
            )

        def score_row(row):
            left, right = row["_left"], row["_right"]
            if left is None or right is None:
                return None
            return sim_func(str(left), str(right))

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            score_row,
            return_dtype=pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        metric: Union[str, Metric] = "levenshtein",
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum similarity score to return True (0.0 to 1.0)
            metric: Similarity metric to use (string or Metric enum)

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("John", min_similarity=0.75))
        """
        return self.similarity(other, metric=metric) >= min_similarity

    def best_match(
        self,
        choices: Sequence[str],
        metric: Union[str, Metric] = "levenshtein",
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            metric: Similarity metric to use (string or Metric enum)
            min_similarity: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzy.best_match(categories)
            ... )
        """
        metric_name = normalize_metric(metric)

        def find_best(value):
            result = batch.best_match(str(value), choices, metric=metric_name)
            if result is None or result.score < min_similarity:
                return None
            return result.text

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def best_match_score(
        self,
        choices: Sequence[str],
        metric: Union[str, Metric] = "levenshtein",
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Get both the best match and its score as a struct.

        Args:
            choices: List of strings to match against
            metric: Similarity metric to use (string or Metric enum)
            min_similarity: Minimum score to return a match

        Returns:
            Struct expression with fields 'match' and 'score'

        Example:
            >>> df.with_columns(
            ...     result=pl.col("name").fuzzy.best_match_score(candidates)
            ... ).select(
            ...     pl.col("result").struct.field("match"),
            ...     pl.col("result").struct.field("score"),
            ... )
        """
        metric_name = normalize_metric(metric)

        def find_best_with_score(value):
            result = batch.best_match(str(value), choices, metric=metric_name)
            if result is None or result.score < min_similarity:
                return {"match": None, "score": None}
            return {"match": result.text, "score": result.score}

        return self._expr.map_elements(
            find_best_with_score,
            return_dtype=pl.Struct({"match": pl.Utf8, "score": pl.Float64}),
        )


__all__ = ["FuzzyExprNamespace"]
