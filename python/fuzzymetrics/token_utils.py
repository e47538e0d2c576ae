"""Merged token lists/sets and the counts derived from them.

``TokenUtilities`` remembers the sizes recorded by the most recent merge, so
``common_terms()`` and ``common_set_terms()`` always reflect the last pair of
sequences that were merged. Metrics create one instance per call; an instance
must not be shared between concurrent callers.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence


@dataclass(frozen=True)
class TokenCounts:
    """Snapshot of the counts from one merge.

    Attributes:
        first: Size of the first sequence (distinct size after a set merge).
        second: Size of the second sequence (distinct size after a set merge).
        merged: Size of the merged list or set.
        common: ``first + second - merged``.
    """

    first: int
    second: int
    merged: int
    common: int


class TokenUtilities:
    """Builds merged token collections and the counts derived from them."""

    def __init__(self):
        self._all_tokens: List[str] = []
        self._token_set: Dict[str, None] = {}
        self._first_token_count = 0
        self._second_token_count = 0
        self._first_set_token_count = 0
        self._second_set_token_count = 0

    @property
    def first_token_count(self) -> int:
        return self._first_token_count

    @property
    def second_token_count(self) -> int:
        return self._second_token_count

    @property
    def first_set_token_count(self) -> int:
        return self._first_set_token_count

    @property
    def second_set_token_count(self) -> int:
        return self._second_set_token_count

    @property
    def merged_tokens(self) -> List[str]:
        return list(self._all_tokens)

    @property
    def token_set(self) -> List[str]:
        return list(self._token_set)

    def create_merged_list(self, first: Sequence[str], second: Sequence[str]) -> List[str]:
        """Concatenate both sequences, keeping duplicates."""
        self._first_token_count = len(first)
        self._second_token_count = len(second)
        self._all_tokens = [*first, *second]
        return list(self._all_tokens)

    def create_merged_set(self, first: Sequence[str], second: Sequence[str]) -> List[str]:
        """Union of both sequences in first-seen order.

        The recorded sizes are the distinct token counts of each side.
        """
        self._first_set_token_count = len(set(first))
        self._second_set_token_count = len(set(second))
        self._token_set = dict.fromkeys([*first, *second])
        return list(self._token_set)

    def create_set(self, tokens: Sequence[str]) -> List[str]:
        """Distinct tokens of a single sequence, in first-seen order."""
        self._token_set = dict.fromkeys(tokens)
        self._first_token_count = len(self._token_set)
        self._second_token_count = 0
        return list(self._token_set)

    def common_terms(self) -> int:
        return self._first_token_count + self._second_token_count - len(self._all_tokens)

    def common_set_terms(self) -> int:
        return self._first_set_token_count + self._second_set_token_count - len(self._token_set)

    def list_counts(self) -> TokenCounts:
        return TokenCounts(
            first=self._first_token_count,
            second=self._second_token_count,
            merged=len(self._all_tokens),
            common=self.common_terms(),
        )

    def set_counts(self) -> TokenCounts:
        return TokenCounts(
            first=self._first_set_token_count,
            second=self._second_set_token_count,
            merged=len(self._token_set),
            common=self.common_set_terms(),
        )


__all__ = ["TokenCounts", "TokenUtilities"]
