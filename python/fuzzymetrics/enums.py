"""Enums for the fuzzymetrics API."""

from enum import Enum


class Metric(str, Enum):
    """Available similarity metrics.

    This enum provides type-safe metric selection for the dispatch functions.
    Plain lowercase strings with the same values are accepted too.

    Example:
        >>> from fuzzymetrics import Metric, similarity
        >>> similarity("MARTHA", "MARHTA", metric=Metric.JARO_WINKLER) > 0.96
        True
    """

    BLOCK_DISTANCE = "block_distance"
    """Manhattan distance between whitespace token vectors"""

    CHAPMAN_LENGTH_DEVIATION = "chapman_length_deviation"
    """Shorter length divided by longer length"""

    CHAPMAN_MEAN_LENGTH = "chapman_mean_length"
    """Combined-length heuristic, 1.0 once both strings together exceed 500 characters"""

    COSINE = "cosine"
    """Cosine similarity of whitespace token sets"""

    DICE = "dice"
    """Dice coefficient of whitespace token sets"""

    EUCLIDEAN_DISTANCE = "euclidean_distance"
    """Euclidean distance between whitespace token vectors"""

    JACCARD = "jaccard"
    """Jaccard similarity of whitespace token sets"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    MATCHING_COEFFICIENT = "matching_coefficient"
    """Matched whitespace tokens over the larger token count"""

    MONGE_ELKAN = "monge_elkan"
    """Average best Smith-Waterman-Gotoh match per word (not symmetric)"""

    NEEDLEMAN_WUNSCH = "needleman_wunsch"
    """Global alignment with a gap cost of 2"""

    OVERLAP_COEFFICIENT = "overlap_coefficient"
    """Shared whitespace tokens over the smaller token set"""

    QGRAMS_DISTANCE = "qgrams_distance"
    """Distance between padded trigram count vectors"""

    SMITH_WATERMAN = "smith_waterman"
    """Local alignment with a linear gap cost"""

    SMITH_WATERMAN_GOTOH = "smith_waterman_gotoh"
    """Local alignment with affine gaps"""

    SMITH_WATERMAN_GOTOH_WINDOWED_AFFINE = "smith_waterman_gotoh_windowed_affine"
    """Local alignment with affine gaps looking back at most 100 characters"""


__all__ = ["Metric"]
