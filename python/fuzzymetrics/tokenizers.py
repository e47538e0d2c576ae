"""Tokenizers and stop-term filters feeding the vector-space metrics.

A tokenizer turns a string into an ordered list of tokens. Tokenizing the same
input twice always yields the same list. Duplicates are kept because several
metrics count occurrences.

Two families are provided:

- ``WhitespaceTokenizer``: splits on carriage return, newline, tab, space and
  non-breaking space. Consecutive or trailing delimiters produce empty-string
  tokens rather than being skipped.
- ``QGramTokenizer``: fixed-length character windows, optionally padded
  ("extended") and optionally enriched with skip-grams ("character
  combination", also known as S-grams).

Example:
    >>> from fuzzymetrics.tokenizers import QGram3ExtendedTokenizer, WhitespaceTokenizer
    >>> WhitespaceTokenizer().tokenize("the cat sat")
    ['the', 'cat', 'sat']
    >>> QGram3ExtendedTokenizer().tokenize("ab")
    ['??a', '?ab', 'ab#', 'b##']
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, List, Optional, Set

from fuzzymetrics.exceptions import ValidationError

DEFAULT_START_PAD = "?"
DEFAULT_END_PAD = "#"
WHITESPACE_DELIMITERS = "\r\n\t \xa0"


class TermFilter(ABC):
    """Decides which generated terms are dropped during tokenization."""

    name: str = "TermFilter"

    @abstractmethod
    def is_stop_term(self, term: str) -> bool:
        """Return True when ``term`` must be excluded from the token list."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.is_stop_term(term)


class NoStopTerms(TermFilter):
    """Default filter: keeps every term."""

    name = "DummyStopTermHandler"

    def is_stop_term(self, term: str) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "NoStopTerms()"


class StopTermFilter(TermFilter):
    """Immutable set of stop terms.

    Use ``with_terms`` / ``without_terms`` to derive a new filter instead of
    mutating one that tokenizers may already share.

    Example:
        >>> stop = StopTermFilter(["the", "a"])
        >>> WhitespaceTokenizer(term_filter=stop).tokenize("the cat")
        ['cat']
    """

    name = "StopTermFilter"

    def __init__(self, terms: Iterable[str] = ()):
        self._terms: FrozenSet[str] = frozenset(terms)

    @property
    def terms(self) -> FrozenSet[str]:
        return self._terms

    def is_stop_term(self, term: str) -> bool:
        return term in self._terms

    def with_terms(self, *terms: str) -> "StopTermFilter":
        return StopTermFilter(self._terms | set(terms))

    def without_terms(self, *terms: str) -> "StopTermFilter":
        return StopTermFilter(self._terms - set(terms))

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"StopTermFilter({sorted(self._terms)!r})"


class Tokenizer(ABC):
    """Splits a string into an ordered sequence of tokens."""

    name: str = "Tokenizer"

    def __init__(self, term_filter: Optional[TermFilter] = None):
        self._term_filter = term_filter if term_filter is not None else NoStopTerms()

    @property
    def term_filter(self) -> TermFilter:
        return self._term_filter

    @property
    def delimiters(self) -> str:
        return ""

    @abstractmethod
    def tokenize(self, word: Optional[str]) -> List[str]:
        """Return the ordered tokens of ``word`` (empty list for ``None``)."""

    def tokenize_to_set(self, word: Optional[str]) -> Set[str]:
        """Return the distinct tokens of ``word``."""
        return set(self.tokenize(word))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(term_filter={self._term_filter!r})"


class WhitespaceTokenizer(Tokenizer):
    """Word tokenizer splitting on ``WHITESPACE_DELIMITERS``.

    The scan skips one whitespace character at the current position, then
    reads up to the next delimiter. A run of two delimiters therefore yields
    an empty token between them, and a trailing delimiter yields a final
    empty token:

        >>> WhitespaceTokenizer().tokenize("a  b ")
        ['a', '', 'b', '']
    """

    name = "TokeniserWhitespace"

    @property
    def delimiters(self) -> str:
        return WHITESPACE_DELIMITERS

    def tokenize(self, word: Optional[str]) -> List[str]:
        tokens: List[str] = []
        if word is None:
            return tokens

        length = len(word)
        start = 0
        while start < length:
            if word[start].isspace():
                start += 1
            end = length
            for delimiter in WHITESPACE_DELIMITERS:
                index = word.find(delimiter, start)
                if index != -1 and index < end:
                    end = index
            term = word[start:end]
            if not self._term_filter.is_stop_term(term):
                tokens.append(term)
            start = end
        return tokens


class QGramTokenizer(Tokenizer):
    """Character q-gram tokenizer.

    Args:
        q: Gram length, at least 1.
        extended: Pad with ``q - 1`` start and end characters so that every
            input, even an empty one, yields at least one gram.
        character_combination: Also emit skip-grams made of the first
            ``q - 1`` characters of a window plus the character right after
            the window.
        term_filter: Optional stop-term filter.

    Raises:
        ValidationError: If ``q`` is less than 1.
    """

    name = "TokeniserQGram"

    def __init__(
        self,
        q: int = 3,
        extended: bool = False,
        character_combination: bool = False,
        term_filter: Optional[TermFilter] = None,
    ):
        if q < 1:
            raise ValidationError(f"q must be at least 1, got {q}")
        super().__init__(term_filter)
        self._q = q
        self._extended = extended
        self._character_combination = character_combination

    @property
    def q(self) -> int:
        return self._q

    @property
    def extended(self) -> bool:
        return self._extended

    @property
    def character_combination(self) -> bool:
        return self._character_combination

    def tokenize(self, word: Optional[str]) -> List[str]:
        if word is None or (word == "" and not self._extended):
            return []

        q = self._q
        pad = q - 1
        if self._extended:
            padded = DEFAULT_START_PAD * pad + word + DEFAULT_END_PAD * pad
            window_count = len(word) + pad
        else:
            padded = word
            window_count = len(word) - q + 1

        tokens: List[str] = []
        for i in range(window_count):
            term = padded[i : i + q]
            if not self._term_filter.is_stop_term(term):
                tokens.append(term)

        if self._character_combination:
            seen = set(tokens)
            for j in range(window_count - 1):
                term = padded[j : j + pad] + padded[j + q]
                if term not in seen and not self._term_filter.is_stop_term(term):
                    tokens.append(term)
                    seen.add(term)
        return tokens

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(q={self._q}, extended={self._extended}, "
            f"character_combination={self._character_combination})"
        )


class QGram2Tokenizer(QGramTokenizer):
    name = "TokeniserQGram2"

    def __init__(self, term_filter: Optional[TermFilter] = None):
        super().__init__(q=2, term_filter=term_filter)


class QGram2ExtendedTokenizer(QGramTokenizer):
    name = "TokeniserQGram2Extended"

    def __init__(self, term_filter: Optional[TermFilter] = None):
        super().__init__(q=2, extended=True, term_filter=term_filter)


class QGram3Tokenizer(QGramTokenizer):
    name = "TokeniserQGram3"

    def __init__(self, term_filter: Optional[TermFilter] = None):
        super().__init__(q=3, term_filter=term_filter)


class QGram3ExtendedTokenizer(QGramTokenizer):
    name = "TokeniserQGram3Extended"

    def __init__(self, term_filter: Optional[TermFilter] = None):
        super().__init__(q=3, extended=True, term_filter=term_filter)


class SGram3Tokenizer(QGramTokenizer):
    """Trigrams plus skip-grams (``"abcd"`` also yields ``"abd"``)."""

    name = "TokeniserSGram3"

    def __init__(self, term_filter: Optional[TermFilter] = None):
        super().__init__(q=3, character_combination=True, term_filter=term_filter)


__all__ = [
    "TermFilter",
    "NoStopTerms",
    "StopTermFilter",
    "Tokenizer",
    "WhitespaceTokenizer",
    "QGramTokenizer",
    "QGram2Tokenizer",
    "QGram2ExtendedTokenizer",
    "QGram3Tokenizer",
    "QGram3ExtendedTokenizer",
    "SGram3Tokenizer",
    "DEFAULT_START_PAD",
    "DEFAULT_END_PAD",
    "WHITESPACE_DELIMITERS",
]
