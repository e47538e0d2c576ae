"""Substitution and affine gap cost functions used by the alignment metrics.

Two independent strategy families live here:

- ``SubstitutionCost``: the score for aligning character ``a[i]`` with
  ``b[j]``. Lookups are bounds-checked and never raise; an out-of-range index
  or a ``None`` string yields the table's ``min_cost``.
- ``AffineGapCost``: the score for a gap spanning ``text[start:end]``,
  modelled as an opening cost plus a per-extra-character extension.

Example:
    >>> from fuzzymetrics.costs import PhoneticCost, AffineGapFive
    >>> PhoneticCost().cost("dog", 0, "tog", 0)
    3.0
    >>> AffineGapFive().cost("hello", 1, 4)
    7.0
"""

from abc import ABC, abstractmethod
from typing import Optional


class SubstitutionCost(ABC):
    """Cost of substituting one character for another."""

    name: str = "SubstitutionCost"

    @property
    @abstractmethod
    def min_cost(self) -> float:
        """Lowest value ``cost`` can return."""

    @property
    @abstractmethod
    def max_cost(self) -> float:
        """Highest value ``cost`` can return."""

    @abstractmethod
    def cost(self, a: Optional[str], i: int, b: Optional[str], j: int) -> float:
        """Return the cost of aligning ``a[i]`` with ``b[j]``."""

    def _in_range(self, a: Optional[str], i: int, b: Optional[str], j: int) -> bool:
        if a is None or b is None:
            return False
        return 0 <= i < len(a) and 0 <= j < len(b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BinaryCost(SubstitutionCost):
    """0 for identical characters, 1 otherwise. Suited to edit distances."""

    name = "SubCostRange0To1"

    @property
    def min_cost(self) -> float:
        return 0.0

    @property
    def max_cost(self) -> float:
        return 1.0

    def cost(self, a: Optional[str], i: int, b: Optional[str], j: int) -> float:
        if not self._in_range(a, i, b, j):
            return self.min_cost
        return 0.0 if a[i] == b[j] else 1.0


class BipolarCost(SubstitutionCost):
    """1 for identical characters, -2 otherwise. Suited to local alignment."""

    name = "SubCostRange1ToMinus2"

    @property
    def min_cost(self) -> float:
        return -2.0

    @property
    def max_cost(self) -> float:
        return 1.0

    def cost(self, a: Optional[str], i: int, b: Optional[str], j: int) -> float:
        if not self._in_range(a, i, b, j):
            return self.min_cost
        return 1.0 if a[i] == b[j] else -2.0


# Characters within one group are treated as an approximate match.
PHONETIC_GROUPS = (
    frozenset("dt"),
    frozenset("gj"),
    frozenset("lr"),
    frozenset("mn"),
    frozenset("bpv"),
    frozenset("aeiou"),
    frozenset(",."),
)


class PhoneticCost(SubstitutionCost):
    """5 for identical characters, 3 for phonetically close ones, -3 otherwise.

    Two characters are phonetically close when their lowercase forms share one
    of the ``PHONETIC_GROUPS``. The exact-match test is case sensitive; the
    group test is not.
    """

    name = "SubCostRange5ToMinus3"

    EXACT_MATCH = 5.0
    APPROXIMATE_MATCH = 3.0
    MISMATCH = -3.0

    @property
    def min_cost(self) -> float:
        return self.MISMATCH

    @property
    def max_cost(self) -> float:
        return self.EXACT_MATCH

    def cost(self, a: Optional[str], i: int, b: Optional[str], j: int) -> float:
        if not self._in_range(a, i, b, j):
            return self.min_cost
        first, second = a[i], b[j]
        if first == second:
            return self.EXACT_MATCH
        first, second = first.lower(), second.lower()
        for group in PHONETIC_GROUPS:
            if first in group and second in group:
                return self.APPROXIMATE_MATCH
        return self.MISMATCH


class AffineGapCost(ABC):
    """Cost of a gap covering ``text[start:end]``."""

    name: str = "AffineGapCost"

    @property
    @abstractmethod
    def min_cost(self) -> float:
        """Lowest value ``cost`` can return."""

    @property
    @abstractmethod
    def max_cost(self) -> float:
        """Cost of opening a gap.

        This is the cost of a one-character gap, not an upper bound: longer
        gaps add their extension cost on top of it.
        """

    @abstractmethod
    def cost(self, text: Optional[str], start: int, end: int) -> float:
        """Return the cost of a gap from ``start`` (inclusive) to ``end`` (exclusive)."""


class AffineGap(AffineGapCost):
    """Affine gap: ``open_cost + (end - 1 - start) * extend_cost``.

    ``max_cost`` reports ``open_cost``; a gap of more than one character
    costs more than that.

    Args:
        open_cost: Cost of the first gapped character.
        extend_cost: Cost of every further gapped character.
    """

    name = "AffineGap"

    def __init__(self, open_cost: float = 5.0, extend_cost: float = 1.0):
        self._open_cost = float(open_cost)
        self._extend_cost = float(extend_cost)

    @property
    def open_cost(self) -> float:
        return self._open_cost

    @property
    def extend_cost(self) -> float:
        return self._extend_cost

    @property
    def min_cost(self) -> float:
        return 0.0

    @property
    def max_cost(self) -> float:
        return self._open_cost

    def cost(self, text: Optional[str], start: int, end: int) -> float:
        if start >= end:
            return 0.0
        return self._open_cost + (end - 1 - start) * self._extend_cost

    def __repr__(self) -> str:
        return f"{type(self).__name__}(open_cost={self._open_cost}, extend_cost={self._extend_cost})"


class AffineGapOneThird(AffineGap):
    """Gap opens at 1 and grows by 1/3 per extra character."""

    name = "AffineGapRange1To0Multiplier1Over3"

    def __init__(self):
        super().__init__(open_cost=1.0, extend_cost=1.0 / 3.0)


class AffineGapFive(AffineGap):
    """Gap opens at 5 and grows by 1 per extra character."""

    name = "AffineGapRange5To0Multiplier1"

    def __init__(self):
        super().__init__(open_cost=5.0, extend_cost=1.0)


__all__ = [
    "SubstitutionCost",
    "BinaryCost",
    "BipolarCost",
    "PhoneticCost",
    "PHONETIC_GROUPS",
    "AffineGapCost",
    "AffineGap",
    "AffineGapOneThird",
    "AffineGapFive",
]
