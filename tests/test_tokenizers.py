"""Tests for the whitespace and q-gram tokenizers and the stop-term filters."""

import pytest

import fuzzymetrics as fm
from fuzzymetrics.tokenizers import (
    NoStopTerms,
    QGram2ExtendedTokenizer,
    QGram2Tokenizer,
    QGram3ExtendedTokenizer,
    QGram3Tokenizer,
    QGramTokenizer,
    SGram3Tokenizer,
    StopTermFilter,
    WhitespaceTokenizer,
)


class TestWhitespaceTokenizer:
    """Tests for WhitespaceTokenizer."""

    def test_simple_words(self):
        assert WhitespaceTokenizer().tokenize("the cat sat") == ["the", "cat", "sat"]

    def test_all_delimiters(self):
        assert WhitespaceTokenizer().tokenize("a\tb\nc\rd\xa0e") == ["a", "b", "c", "d", "e"]

    def test_leading_delimiter_is_skipped(self):
        assert WhitespaceTokenizer().tokenize(" a") == ["a"]

    def test_repeated_and_trailing_delimiters_yield_empty_tokens(self):
        """A run of delimiters and a trailing delimiter both produce empty tokens."""
        assert WhitespaceTokenizer().tokenize("a  b ") == ["a", "", "b", ""]

    def test_empty_and_none(self):
        tokenizer = WhitespaceTokenizer()
        assert tokenizer.tokenize("") == []
        assert tokenizer.tokenize(None) == []

    def test_keeps_duplicates_in_order(self):
        assert WhitespaceTokenizer().tokenize("a b a") == ["a", "b", "a"]

    def test_restartable(self):
        tokenizer = WhitespaceTokenizer()
        assert tokenizer.tokenize("x y z") == tokenizer.tokenize("x y z")

    def test_tokenize_to_set(self):
        assert WhitespaceTokenizer().tokenize_to_set("a a b") == {"a", "b"}

    def test_delimiters(self):
        assert WhitespaceTokenizer().delimiters == "\r\n\t \xa0"

    def test_stop_terms_are_dropped(self):
        tokenizer = WhitespaceTokenizer(term_filter=StopTermFilter(["the", "a"]))
        assert tokenizer.tokenize("the cat and a dog") == ["cat", "and", "dog"]


class TestQGramTokenizer:
    """Tests for QGramTokenizer and its presets."""

    def test_bigrams(self):
        assert QGram2Tokenizer().tokenize("night") == ["ni", "ig", "gh", "ht"]

    def test_trigrams(self):
        assert QGram3Tokenizer().tokenize("abcd") == ["abc", "bcd"]

    def test_short_input_without_padding_is_empty(self):
        assert QGram3Tokenizer().tokenize("ab") == []
        assert QGram3Tokenizer().tokenize("") == []

    def test_extended_trigrams_pad_short_input(self):
        """Padding guarantees tokens even for input shorter than q."""
        tokens = QGram3ExtendedTokenizer().tokenize("ab")
        assert tokens == ["??a", "?ab", "ab#", "b##"]

    def test_extended_token_count(self):
        for word in ["", "a", "hello"]:
            assert len(QGram3ExtendedTokenizer().tokenize(word)) == len(word) + 2, word
            assert len(QGram2ExtendedTokenizer().tokenize(word)) == len(word) + 1, word

    def test_extended_empty_string(self):
        assert QGram2ExtendedTokenizer().tokenize("") == ["?#"]

    def test_none(self):
        assert QGram3ExtendedTokenizer().tokenize(None) == []

    def test_skip_grams(self):
        assert SGram3Tokenizer().tokenize("abcd") == ["abc", "bcd", "abd"]

    def test_skip_grams_are_not_repeated(self):
        tokens = SGram3Tokenizer().tokenize("aaaaa")
        assert tokens == ["aaa", "aaa", "aaa"]

    def test_unigrams(self):
        assert QGramTokenizer(q=1).tokenize("abc") == ["a", "b", "c"]

    def test_invalid_q(self):
        with pytest.raises(fm.ValidationError, match="q must be at least 1"):
            QGramTokenizer(q=0)

    def test_properties(self):
        tokenizer = QGramTokenizer(q=4, extended=True, character_combination=True)
        assert tokenizer.q == 4
        assert tokenizer.extended is True
        assert tokenizer.character_combination is True

    def test_stop_terms_are_dropped(self):
        tokenizer = QGram2Tokenizer(term_filter=StopTermFilter(["ig"]))
        assert tokenizer.tokenize("night") == ["ni", "gh", "ht"]


class TestTermFilters:
    """Tests for NoStopTerms and StopTermFilter."""

    def test_no_stop_terms(self):
        term_filter = NoStopTerms()
        assert not term_filter.is_stop_term("the")
        assert len(term_filter) == 0

    def test_default_filter(self):
        assert isinstance(WhitespaceTokenizer().term_filter, NoStopTerms)

    def test_membership(self):
        term_filter = StopTermFilter(["the"])
        assert "the" in term_filter
        assert "cat" not in term_filter
        assert 42 not in term_filter

    def test_with_terms_returns_new_filter(self):
        original = StopTermFilter(["the"])
        extended = original.with_terms("a", "an")
        assert len(original) == 1, "with_terms must not mutate the original filter"
        assert extended.terms == frozenset({"the", "a", "an"})

    def test_without_terms_returns_new_filter(self):
        original = StopTermFilter(["the", "a"])
        reduced = original.without_terms("a")
        assert original.is_stop_term("a")
        assert not reduced.is_stop_term("a")
        assert reduced.is_stop_term("the")
