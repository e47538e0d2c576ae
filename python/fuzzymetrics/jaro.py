"""Jaro and Jaro-Winkler character-alignment metrics."""

from typing import List, Optional

from fuzzymetrics.base import StringMetric

DEFAULT_PREFIX_SCALE = 0.1
MAX_PREFIX_LENGTH = 4


def _common_characters(first: str, second: str, separation: int) -> List[str]:
    """Characters of ``first`` matched, in order, to unused characters of ``second``.

    A character at position ``i`` may match positions ``[i - separation,
    i + separation)`` of ``second``.
    """
    used = [False] * len(second)
    common: List[str] = []
    for i, ch in enumerate(first):
        for j in range(max(0, i - separation), min(i + separation, len(second))):
            if not used[j] and second[j] == ch:
                used[j] = True
                common.append(ch)
                break
    return common


class Jaro(StringMetric):
    """Jaro similarity.

    Characters match when they are equal and no further apart than half the
    shorter length plus one. The score averages the matched share of each
    string and the share of matches that are not transposed.

    Example:
        >>> round(Jaro().similarity("MARTHA", "MARHTA"), 4)
        0.9444
    """

    name = "Jaro"
    description = (
        "Implements the Jaro algorithm providing a similarity measure between two "
        "strings allowing character transpositions to a degree"
    )

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        separation = min(len(a), len(b)) // 2 + 1
        first = _common_characters(a, b, separation)
        matches = len(first)
        if matches == 0:
            return 0.0
        second = _common_characters(b, a, separation)
        if matches != len(second):
            return 0.0
        transpositions = sum(x != y for x, y in zip(first, second)) // 2
        return (
            matches / (3.0 * len(a))
            + matches / (3.0 * len(b))
            + (matches - transpositions) / (3.0 * matches)
        )

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return len(a) * len(b) * 4.1200001e-05


class JaroWinkler(StringMetric):
    """Jaro similarity boosted for a shared prefix of up to four characters.

    Args:
        prefix_scale: Weight of each shared prefix character. Values above
            0.25 can push scores past 1.0.

    Example:
        >>> round(JaroWinkler().similarity("MARTHA", "MARHTA"), 4)
        0.9611
    """

    name = "JaroWinkler"
    description = (
        "Implements the Jaro-Winkler algorithm providing a similarity measure between two "
        "strings allowing character transpositions to a degree adjusting the weighting "
        "for common prefixes"
    )

    def __init__(self, prefix_scale: float = DEFAULT_PREFIX_SCALE):
        self._prefix_scale = prefix_scale
        self._jaro = Jaro()

    @property
    def prefix_scale(self) -> float:
        return self._prefix_scale

    @staticmethod
    def prefix_length(a: str, b: str) -> int:
        limit = min(MAX_PREFIX_LENGTH, len(a), len(b))
        for i in range(limit):
            if a[i] != b[i]:
                return i
        return limit

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        score = self._jaro.similarity(a, b)
        return score + self.prefix_length(a, b) * self._prefix_scale * (1.0 - score)

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return len(a) * len(b) * 4.3420001e-05

    def __repr__(self) -> str:
        return f"JaroWinkler(prefix_scale={self._prefix_scale})"


__all__ = ["Jaro", "JaroWinkler", "DEFAULT_PREFIX_SCALE", "MAX_PREFIX_LENGTH"]
