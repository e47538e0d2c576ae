"""
fuzzymetrics - String similarity metrics

A library of classic string similarity and distance metrics built from
composable tokenizers, substitution cost tables and affine gap costs, with
list and Polars batch helpers on top.

Example usage:
    >>> import fuzzymetrics as fm

    # Simple similarity, by metric name
    >>> round(fm.similarity("kitten", "sitting"), 4)
    0.5714
    >>> fm.unnormalized_similarity("kitten", "sitting")
    3.0

    # Configured metric instances
    >>> from fuzzymetrics.tokenizers import QGram2Tokenizer
    >>> fm.DiceSimilarity(QGram2Tokenizer()).similarity("night", "nacht")
    0.25

    # Best match from a list (returns a MatchResult)
    >>> fm.best_match("appel", ["apple", "apply", "banana"], metric="jaro_winkler").text
    'apple'
"""

import logging
from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzymetrics.expr  # noqa: F401
from fuzzymetrics._utils import create_metric
from fuzzymetrics.alignment import (
    Levenshtein,
    NeedlemanWunsch,
    SmithWaterman,
    SmithWatermanGotoh,
    SmithWatermanGotohWindowedAffine,
)
from fuzzymetrics.base import StringMetric
from fuzzymetrics.batch import (
    best_match,
    best_matches,
    contains_fuzzy,
    filter_fuzzy,
    pairwise,
    similarities,
    similarity_matrix,
    worst_match,
    worst_matches,
)
from fuzzymetrics.composite import MongeElkan
from fuzzymetrics.enums import Metric
from fuzzymetrics.exceptions import AlgorithmError, SimMetricsError, ValidationError
from fuzzymetrics.jaro import Jaro, JaroWinkler
from fuzzymetrics.polars_api import batch_best_match, batch_similarity, match_series
from fuzzymetrics.results import MatchResult
from fuzzymetrics.scoring import similarity, unnormalized_similarity
from fuzzymetrics.token_metrics import (
    BlockDistance,
    ChapmanLengthDeviation,
    ChapmanMeanLength,
    CosineSimilarity,
    DiceSimilarity,
    EuclideanDistance,
    JaccardSimilarity,
    MatchingCoefficient,
    OverlapCoefficient,
    QGramsDistance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("fuzzymetrics")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "SimMetricsError",
    "ValidationError",
    "AlgorithmError",
    # Result types
    "MatchResult",
    # Enums
    "Metric",
    # Metric contract
    "StringMetric",
    "create_metric",
    # Token metrics
    "BlockDistance",
    "CosineSimilarity",
    "DiceSimilarity",
    "EuclideanDistance",
    "JaccardSimilarity",
    "MatchingCoefficient",
    "OverlapCoefficient",
    "QGramsDistance",
    # Length metrics
    "ChapmanLengthDeviation",
    "ChapmanMeanLength",
    # Character and alignment metrics
    "Jaro",
    "JaroWinkler",
    "Levenshtein",
    "NeedlemanWunsch",
    "SmithWaterman",
    "SmithWatermanGotoh",
    "SmithWatermanGotohWindowedAffine",
    # Composite
    "MongeElkan",
    # Single-pair scoring
    "similarity",
    "unnormalized_similarity",
    # Batch processing
    "similarities",
    "best_match",
    "best_matches",
    "worst_match",
    "worst_matches",
    "contains_fuzzy",
    "filter_fuzzy",
    "pairwise",
    "similarity_matrix",
    # Polars Integration
    "batch_similarity",
    "batch_best_match",
    "match_series",
]
