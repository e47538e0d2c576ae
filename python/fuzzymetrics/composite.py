"""Monge-Elkan: token-level matching driven by an inner metric."""

from typing import Optional

from fuzzymetrics.alignment import SmithWatermanGotoh
from fuzzymetrics.base import StringMetric
from fuzzymetrics.token_metrics import TokenMetric
from fuzzymetrics.tokenizers import Tokenizer


class MongeElkan(TokenMetric):
    """Average best-match score of each token of ``a`` against the tokens of ``b``.

    The score is not symmetric: every token of the first string looks for its
    closest partner in the second, so ``"hello"`` is fully contained in
    ``"hello world"`` but not the other way round.

    Args:
        tokenizer: Splits both strings into tokens, whitespace by default.
        inner: Metric comparing individual tokens, ``SmithWatermanGotoh`` by
            default.

    Example:
        >>> me = MongeElkan()
        >>> me.similarity("hello", "hello world")
        1.0
        >>> me.similarity("hello world", "hello") < 1.0
        True
    """

    name = "MongeElkan"
    description = (
        "Implements the Monge Elkan algorithm providing an matching style similarity "
        "measure between two strings"
    )

    def __init__(self, tokenizer: Optional[Tokenizer] = None, inner: Optional[StringMetric] = None):
        super().__init__(tokenizer)
        self._inner = inner if inner is not None else SmithWatermanGotoh()

    @property
    def inner(self) -> StringMetric:
        return self._inner

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        first, second = self._tokenize_pair(a, b)
        if not first:
            return 0.0
        total = 0.0
        for token in first:
            total += max((self._inner.similarity(token, other) for other in second), default=0.0)
        return total / len(first)

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._token_cost(a, b, 3.4400001e-02)

    def __repr__(self) -> str:
        return f"MongeElkan(tokenizer={self._tokenizer!r}, inner={self._inner!r})"


__all__ = ["MongeElkan"]
