"""Dynamic-programming alignment metrics.

Global alignment (``NeedlemanWunsch`` and its unit-gap special case
``Levenshtein``) minimizes an edit cost, so the raw value is a distance.
Local alignment (``SmithWaterman`` and the Gotoh variants) maximizes a score
floored at zero in every cell, so the raw value is the best local score.

Empty inputs: two empty strings are identical (similarity 1.0). An empty
string against a non-empty one aligns nothing, so every character of the
other string is an unmatched edit.

Example:
    >>> Levenshtein().unnormalized_similarity("kitten", "sitting")
    3.0
    >>> SmithWatermanGotoh().similarity("hello", "hello")
    1.0
"""

import sys
from typing import List, Optional

from fuzzymetrics.base import StringMetric
from fuzzymetrics.costs import (
    AffineGapCost,
    AffineGapFive,
    BinaryCost,
    BipolarCost,
    PhoneticCost,
    SubstitutionCost,
)
from fuzzymetrics.exceptions import ValidationError

DEFAULT_NEEDLEMAN_WUNSCH_GAP_COST = 2.0
DEFAULT_SMITH_WATERMAN_GAP_COST = 0.5
DEFAULT_WINDOW_SIZE = 100


class NeedlemanWunsch(StringMetric):
    """Global alignment with a linear gap cost.

    The first row and column of the cost matrix count one per character, so
    an empty string is ``len(other)`` away from any other string whatever
    the gap cost.

    Args:
        gap_cost: Cost of inserting or deleting one character.
        cost: Substitution cost table, ``BinaryCost`` by default.
    """

    name = "NeedlemanWunch"
    description = (
        "Implements the Needleman-Wunch algorithm providing an edit distance based "
        "similarity measure between two strings"
    )

    def __init__(self, gap_cost: float = DEFAULT_NEEDLEMAN_WUNSCH_GAP_COST, cost: Optional[SubstitutionCost] = None):
        self._gap_cost = float(gap_cost)
        self._cost = cost if cost is not None else BinaryCost()

    @property
    def gap_cost(self) -> float:
        return self._gap_cost

    @property
    def cost(self) -> SubstitutionCost:
        return self._cost

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        distance = self.unnormalized_similarity(a, b)
        longest = max(len(a), len(b))
        ceiling = longest * max(self._cost.max_cost, self._gap_cost)
        floor = longest * min(self._cost.min_cost, self._gap_cost)
        if floor < 0.0:
            ceiling -= floor
            distance -= floor
        if ceiling == 0.0:
            return 1.0
        return 1.0 - distance / ceiling

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """Minimum total alignment cost of turning ``a`` into ``b``."""
        if a is None or b is None:
            return 0.0
        gap, cost = self._gap_cost, self._cost
        previous = [float(j) for j in range(len(b) + 1)]
        for i in range(1, len(a) + 1):
            current = [float(i)] + [0.0] * len(b)
            for j in range(1, len(b) + 1):
                current[j] = min(
                    previous[j] + gap,
                    current[j - 1] + gap,
                    previous[j - 1] + cost.cost(a, i - 1, b, j - 1),
                )
            previous = current
        return float(previous[-1])

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return len(a) * len(b) * 1.8420001e-04

    def __repr__(self) -> str:
        return f"{type(self).__name__}(gap_cost={self._gap_cost}, cost={self._cost!r})"


class Levenshtein(NeedlemanWunsch):
    """Edit distance with unit insert and delete costs.

    ``similarity`` is ``1 - distance / max(len(a), len(b))`` with the default
    ``BinaryCost`` table.
    """

    name = "Levenshtein"
    description = (
        "Implements the basic Levenshtein algorithm providing a similarity measure "
        "between two strings"
    )

    def __init__(self, cost: Optional[SubstitutionCost] = None):
        super().__init__(gap_cost=1.0, cost=cost)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return len(a) * len(b) * 1.8000000e-04

    def __repr__(self) -> str:
        return f"Levenshtein(cost={self._cost!r})"


class SmithWaterman(StringMetric):
    """Local alignment with a linear gap cost.

    Args:
        gap_cost: Score subtracted for each gapped character.
        cost: Substitution score table, ``BipolarCost`` by default.
    """

    name = "SmithWaterman"
    description = "Implements the Smith-Waterman algorithm providing a similarity measure between two string"

    def __init__(self, gap_cost: float = DEFAULT_SMITH_WATERMAN_GAP_COST, cost: Optional[SubstitutionCost] = None):
        self._gap_cost = float(gap_cost)
        self._cost = cost if cost is not None else BipolarCost()

    @property
    def gap_cost(self) -> float:
        return self._gap_cost

    @property
    def cost(self) -> SubstitutionCost:
        return self._cost

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        if not a and not b:
            return 1.0
        normalizer = min(len(a), len(b)) * max(self._cost.max_cost, -self._gap_cost)
        if normalizer == 0.0:
            return 0.0
        return self.unnormalized_similarity(a, b) / normalizer

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """Highest local alignment score; 0.0 when either input is empty."""
        if not a or not b:
            return 0.0
        gap, cost = self._gap_cost, self._cost
        rows: List[List[float]] = []
        best = 0.0
        for i in range(len(a)):
            row = [0.0] * len(b)
            for j in range(len(b)):
                diagonal = rows[i - 1][j - 1] if i and j else 0.0
                score = max(0.0, diagonal + cost.cost(a, i, b, j))
                if i:
                    score = max(score, rows[i - 1][j] - gap)
                if j:
                    score = max(score, row[j - 1] - gap)
                row[j] = score
                best = max(best, score)
            rows.append(row)
        return best

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        first, second = len(a), len(b)
        return (first * second + first + second) * 1.6100000e-04

    def __repr__(self) -> str:
        return f"SmithWaterman(gap_cost={self._gap_cost}, cost={self._cost!r})"


class SmithWatermanGotohWindowedAffine(StringMetric):
    """Local alignment with affine gaps and a bounded gap look-back.

    For every cell, gaps are only considered when they start at most
    ``window_size`` positions back. A window at least as long as both inputs
    gives exactly the unbounded Smith-Waterman-Gotoh score.

    Args:
        gap: Affine gap cost, ``AffineGapFive`` by default.
        cost: Substitution score table, ``PhoneticCost`` by default.
        window_size: Longest gap considered, at least 1.

    Raises:
        ValidationError: If ``window_size`` is less than 1.
    """

    name = "SmithWatermanGotohWindowedAffine"
    description = (
        "Implements the Smith-Waterman-Gotoh algorithm with a windowed affine gap "
        "providing a similarity measure between two string"
    )

    def __init__(
        self,
        gap: Optional[AffineGapCost] = None,
        cost: Optional[SubstitutionCost] = None,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ):
        if window_size < 1:
            raise ValidationError(f"window_size must be at least 1, got {window_size}")
        self._gap = gap if gap is not None else AffineGapFive()
        self._cost = cost if cost is not None else PhoneticCost()
        self._window_size = window_size

    @property
    def gap(self) -> AffineGapCost:
        return self._gap

    @property
    def cost(self) -> SubstitutionCost:
        return self._cost

    @property
    def window_size(self) -> int:
        return self._window_size

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        if not a and not b:
            return 1.0
        normalizer = min(len(a), len(b)) * max(self._cost.max_cost, -self._gap.max_cost)
        if normalizer == 0.0:
            return 0.0
        return self.unnormalized_similarity(a, b) / normalizer

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """Highest local alignment score; 0.0 when either input is empty."""
        if not a or not b:
            return 0.0
        gap, cost, window = self._gap, self._cost, self._window_size
        rows: List[List[float]] = []
        best = 0.0
        for i in range(len(a)):
            row = [0.0] * len(b)
            for j in range(len(b)):
                diagonal = rows[i - 1][j - 1] if i and j else 0.0
                score = max(0.0, diagonal + cost.cost(a, i, b, j))
                for k in range(max(0, i - window), i):
                    score = max(score, rows[k][j] - gap.cost(a, k, i))
                for k in range(max(0, j - window), j):
                    score = max(score, row[k] - gap.cost(b, k, j))
                row[j] = score
                best = max(best, score)
            rows.append(row)
        return best

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        cells = len(a) * len(b)
        return (cells * self._window_size + cells * self._window_size) * 4.5000001e-05

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(gap={self._gap!r}, cost={self._cost!r}, "
            f"window_size={self._window_size})"
        )


class SmithWatermanGotoh(SmithWatermanGotohWindowedAffine):
    """Smith-Waterman-Gotoh with an unbounded gap window."""

    name = "SmithWatermanGotoh"
    description = "Implements the Smith-Waterman-Gotoh algorithm providing a similarity measure between two string"

    def __init__(self, gap: Optional[AffineGapCost] = None, cost: Optional[SubstitutionCost] = None):
        super().__init__(gap=gap, cost=cost, window_size=sys.maxsize)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        first, second = len(a), len(b)
        return (first * second * first + first * second * second) * 2.2000000e-05

    def __repr__(self) -> str:
        return f"SmithWatermanGotoh(gap={self._gap!r}, cost={self._cost!r})"


__all__ = [
    "NeedlemanWunsch",
    "Levenshtein",
    "SmithWaterman",
    "SmithWatermanGotohWindowedAffine",
    "SmithWatermanGotoh",
    "DEFAULT_NEEDLEMAN_WUNSCH_GAP_COST",
    "DEFAULT_SMITH_WATERMAN_GAP_COST",
    "DEFAULT_WINDOW_SIZE",
]
