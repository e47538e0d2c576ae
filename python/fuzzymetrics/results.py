"""Result types returned by the batch API."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MatchResult:
    """Score of one candidate string against a query.

    Supports equality comparison and hashing for use in sets and as dict keys.

    Attributes:
        text: The candidate string as it was passed in (before any manipulator).
        score: Similarity score, in ``[0, 100]`` when percentages were requested.
        id: Position of the candidate in the input sequence.
    """

    text: Optional[str]
    score: float
    id: Optional[int] = None


__all__ = ["MatchResult"]
