"""Internal utilities for fuzzymetrics."""

import logging
import warnings
from typing import Callable, Dict, Union

from fuzzymetrics.alignment import (
    Levenshtein,
    NeedlemanWunsch,
    SmithWaterman,
    SmithWatermanGotoh,
    SmithWatermanGotohWindowedAffine,
)
from fuzzymetrics.base import StringMetric
from fuzzymetrics.composite import MongeElkan
from fuzzymetrics.enums import Metric
from fuzzymetrics.exceptions import AlgorithmError
from fuzzymetrics.jaro import Jaro, JaroWinkler
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

logger = logging.getLogger(__name__)

_FACTORIES: Dict[str, Callable[[], StringMetric]] = {
    Metric.BLOCK_DISTANCE.value: BlockDistance,
    Metric.CHAPMAN_LENGTH_DEVIATION.value: ChapmanLengthDeviation,
    Metric.CHAPMAN_MEAN_LENGTH.value: ChapmanMeanLength,
    Metric.COSINE.value: CosineSimilarity,
    Metric.DICE.value: DiceSimilarity,
    Metric.EUCLIDEAN_DISTANCE.value: EuclideanDistance,
    Metric.JACCARD.value: JaccardSimilarity,
    Metric.JARO.value: Jaro,
    Metric.JARO_WINKLER.value: JaroWinkler,
    Metric.LEVENSHTEIN.value: Levenshtein,
    Metric.MATCHING_COEFFICIENT.value: MatchingCoefficient,
    Metric.MONGE_ELKAN.value: MongeElkan,
    Metric.NEEDLEMAN_WUNSCH.value: NeedlemanWunsch,
    Metric.OVERLAP_COEFFICIENT.value: OverlapCoefficient,
    Metric.QGRAMS_DISTANCE.value: QGramsDistance,
    Metric.SMITH_WATERMAN.value: SmithWaterman,
    Metric.SMITH_WATERMAN_GOTOH.value: SmithWatermanGotoh,
    Metric.SMITH_WATERMAN_GOTOH_WINDOWED_AFFINE.value: SmithWatermanGotohWindowedAffine,
}

# Valid metric names (lowercase)
VALID_METRICS = frozenset(_FACTORIES)

# Old spellings still accepted, mapped to their current name
_DEPRECATED_ALIASES = {
    "levenstein": Metric.LEVENSHTEIN.value,
}


def normalize_metric(metric: Union[str, Metric]) -> str:
    """Convert Metric enum to string, or validate a string metric name.

    Args:
        metric: Either a Metric enum value or a string metric name.

    Returns:
        Lowercase string metric name.

    Raises:
        AlgorithmError: If the metric name is not recognized.
        TypeError: If metric is not a string or Metric enum.

    Example:
        >>> normalize_metric(Metric.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_metric("Levenshtein")
        'levenshtein'
    """
    if isinstance(metric, Metric):
        return metric.value

    if isinstance(metric, str):
        name = metric.lower()
        if name in VALID_METRICS:
            return name
        if name in _DEPRECATED_ALIASES:
            replacement = _DEPRECATED_ALIASES[name]
            warnings.warn(
                f"Metric name '{metric}' is deprecated. Use '{replacement}' instead.",
                DeprecationWarning,
                stacklevel=3,
            )
            return replacement
        raise AlgorithmError(
            f"Unknown metric: '{metric}'. Valid options: {sorted(VALID_METRICS)}"
        )

    raise TypeError(f"metric must be str or Metric enum, got {type(metric).__name__}")


def create_metric(metric: Union[str, Metric]) -> StringMetric:
    """Build a default-configured metric instance.

    A new instance is returned on every call so callers never share one.

    Raises:
        AlgorithmError: If the metric name is not recognized.
        TypeError: If metric is not a string or Metric enum.
    """
    name = normalize_metric(metric)
    instance = _FACTORIES[name]()
    logger.debug("created metric %r for %r", instance, name)
    return instance


__all__ = ["normalize_metric", "create_metric", "VALID_METRICS"]
