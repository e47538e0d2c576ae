"""Vector-space metrics over token sequences.

Every metric here tokenizes both inputs (whitespace words by default) and
compares the resulting token lists or sets. When a metric's normalizer is
zero (no tokens on either side) the similarity is 0.0. The two Chapman
metrics at the end only look at the input lengths.

Example:
    >>> from fuzzymetrics.token_metrics import JaccardSimilarity
    >>> JaccardSimilarity().similarity("the cat sat", "the dog sat")
    0.5
    >>> from fuzzymetrics.token_metrics import DiceSimilarity
    >>> from fuzzymetrics.tokenizers import QGram2Tokenizer
    >>> DiceSimilarity(QGram2Tokenizer()).similarity("night", "nacht")
    0.25
"""

import math
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from fuzzymetrics.base import StringMetric
from fuzzymetrics.token_utils import TokenUtilities
from fuzzymetrics.tokenizers import QGram3ExtendedTokenizer, Tokenizer, WhitespaceTokenizer


def _presence_distance(first: Sequence[str], second: Sequence[str], utils: TokenUtilities) -> int:
    """Sum of |[t in first] - [t in second]| over every token of the merged list."""
    first_set, second_set = set(first), set(second)
    return sum(
        abs((token in first_set) - (token in second_set))
        for token in utils.create_merged_list(first, second)
    )


class TokenMetric(StringMetric):
    """Shared plumbing for metrics that work on tokenized input."""

    default_tokenizer = WhitespaceTokenizer

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self._tokenizer = tokenizer if tokenizer is not None else self.default_tokenizer()

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    def _tokenize_pair(self, a: str, b: str) -> Tuple[List[str], List[str]]:
        return self._tokenizer.tokenize(a), self._tokenizer.tokenize(b)

    def _token_counts(self, a: Optional[str], b: Optional[str]) -> Tuple[int, int]:
        return len(self._tokenizer.tokenize(a)), len(self._tokenizer.tokenize(b))

    def _length_cost(self, a: Optional[str], b: Optional[str], constant: float) -> float:
        if a is None or b is None:
            return 0.0
        total = len(a) + len(b)
        return total * total * constant

    def _token_cost(self, a: Optional[str], b: Optional[str], constant: float) -> float:
        if a is None or b is None:
            return 0.0
        first, second = self._token_counts(a, b)
        return ((first + second) * first + (first + second) * second) * constant

    def _product_cost(self, a: Optional[str], b: Optional[str], constant: float) -> float:
        if a is None or b is None:
            return 0.0
        first, second = self._token_counts(a, b)
        return first * second * constant

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tokenizer={self._tokenizer!r})"


class BlockDistance(TokenMetric):
    """Manhattan (L1) distance between the token occurrence vectors."""

    name = "BlockDistance"
    description = (
        "Implements the Block distance algorithm whereby vector space block "
        "distance is used to determine a similarity"
    )

    def _distance(self, a: str, b: str) -> Tuple[int, int]:
        first, second = self._tokenize_pair(a, b)
        utils = TokenUtilities()
        distance = _presence_distance(first, second, utils)
        return distance, utils.first_token_count + utils.second_token_count

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        distance, total = self._distance(a, b)
        if total == 0:
            return 0.0
        return (total - distance) / total

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return float(self._distance(a, b)[0])

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._token_cost(a, b, 6.4457141e-05)


class EuclideanDistance(TokenMetric):
    """Euclidean (L2) distance between the token occurrence vectors."""

    name = "EuclideanDistance"
    description = (
        "Implements the Euclidean Distance algorithm providing a similarity measure "
        "between two strings using the vector space of combined terms as the dimensions"
    )

    def _distance(self, a: str, b: str) -> Tuple[float, int]:
        first, second = self._tokenize_pair(a, b)
        utils = TokenUtilities()
        squared = _presence_distance(first, second, utils)
        return math.sqrt(squared), utils.first_token_count + utils.second_token_count

    def euclidean_distance(self, a: Optional[str], b: Optional[str]) -> float:
        """Raw Euclidean distance; 0.0 when either input is None."""
        if a is None or b is None:
            return 0.0
        return self._distance(a, b)[0]

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        distance, total = self._distance(a, b)
        if total == 0:
            return 0.0
        normalizer = math.sqrt(total)
        return (normalizer - distance) / normalizer

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.euclidean_distance(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._token_cost(a, b, 7.4457137e-05)


class CosineSimilarity(TokenMetric):
    """Cosine of the angle between the binary term vectors."""

    name = "CosineSimilarity"
    description = (
        "Implements the Cosine Similarity algorithm providing a similarity measure "
        "between two strings from the angular divergence within term based vector space"
    )

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        utils = TokenUtilities()
        utils.create_merged_set(*self._tokenize_pair(a, b))
        counts = utils.set_counts()
        if counts.merged == 0 or counts.first == 0 or counts.second == 0:
            return 0.0
        return counts.common / math.sqrt(counts.first * counts.second)

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._length_cost(a, b, 3.8337140e-07)


class DiceSimilarity(TokenMetric):
    """Dice coefficient: twice the shared terms over the total distinct terms per side."""

    name = "DiceSimilarity"
    description = (
        "Implements the DiceSimilarity algorithm providing a similarity measure "
        "between two strings using the vector space of present terms"
    )

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        utils = TokenUtilities()
        utils.create_merged_set(*self._tokenize_pair(a, b))
        counts = utils.set_counts()
        if counts.merged == 0:
            return 0.0
        return 2.0 * counts.common / (counts.first + counts.second)

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._length_cost(a, b, 3.4457139e-07)


class JaccardSimilarity(TokenMetric):
    """Shared distinct terms over all distinct terms."""

    name = "JaccardSimilarity"
    description = "Implements the Jaccard Similarity algorithm providing a similarity measure between two strings"

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        utils = TokenUtilities()
        utils.create_merged_set(*self._tokenize_pair(a, b))
        counts = utils.set_counts()
        if counts.merged == 0:
            return 0.0
        return counts.common / counts.merged

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._product_cost(a, b, 1.4000000e-04)


class OverlapCoefficient(TokenMetric):
    """Shared distinct terms over the distinct terms of the smaller side."""

    name = "OverlapCoefficient"
    description = (
        "Implements the Overlap Coefficient algorithm providing a similarity measure "
        "between two string where it is determined to what degree a string is a subset of another"
    )

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        utils = TokenUtilities()
        utils.create_merged_set(*self._tokenize_pair(a, b))
        counts = utils.set_counts()
        smaller = min(counts.first, counts.second)
        if smaller == 0:
            return 0.0
        return counts.common / smaller

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._product_cost(a, b, 1.4000000e-04)


class MatchingCoefficient(TokenMetric):
    """Tokens of one side matched by tokens of the other, over the larger token count.

    Each token can be matched at most once, so repeated tokens only count as
    often as they occur on both sides.
    """

    name = "MatchingCoefficient"
    description = "Implements the Matching Coefficient algorithm providing a similarity measure between two strings"

    def _matches(self, a: str, b: str) -> Tuple[int, int]:
        first, second = self._tokenize_pair(a, b)
        utils = TokenUtilities()
        utils.create_merged_list(first, second)
        matched = sum((Counter(first) & Counter(second)).values())
        return matched, max(utils.first_token_count, utils.second_token_count)

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        matched, larger = self._matches(a, b)
        if larger == 0:
            return 0.0
        return matched / larger

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return float(self._matches(a, b)[0])

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return self._product_cost(a, b, 2.0000000e-04)


class QGramsDistance(TokenMetric):
    """L1 distance between q-gram count vectors (padded trigrams by default)."""

    name = "QGramsDistance"
    description = (
        "Implements the Q Grams Distance algorithm providing a similarity measure "
        "between two strings using the qGram approach check matching qGrams/possible matching qGrams"
    )
    default_tokenizer = QGram3ExtendedTokenizer

    def _distance(self, a: str, b: str) -> Tuple[int, int]:
        first, second = self._tokenize_pair(a, b)
        utils = TokenUtilities()
        utils.create_merged_list(first, second)
        first_counts, second_counts = Counter(first), Counter(second)
        distance = sum(
            abs(first_counts[token] - second_counts[token])
            for token in utils.create_merged_set(first, second)
        )
        return distance, utils.first_token_count + utils.second_token_count

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        distance, total = self._distance(a, b)
        if total == 0:
            return 0.0
        return (total - distance) / total

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return float(self._distance(a, b)[0])

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        return len(a) * len(b) * 1.3400000e-04


class ChapmanMeanLength(StringMetric):
    """Length-only score that grows with the combined input length.

    Meant to help pick which metric to apply rather than to measure
    similarity itself: two identical short strings score close to 0.0, and
    any pair whose combined length exceeds ``MAX_LENGTH`` scores 1.0.
    """

    name = "ChapmanMeanLength"
    description = (
        "Implements the Chapman Mean Length algorithm providing a similarity measure "
        "between two strings from the size of the mean length of the vectors"
    )

    MAX_LENGTH = 500

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        total = len(a) + len(b)
        if total > self.MAX_LENGTH:
            return 1.0
        ratio = (self.MAX_LENGTH - total) / self.MAX_LENGTH
        return 1.0 - ratio**4

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return 0.0


class ChapmanLengthDeviation(StringMetric):
    """Ratio of the shorter input length to the longer one."""

    name = "ChapmanLengthDeviation"
    description = (
        "Implements the Chapman Length Deviation algorithm whereby the length deviation "
        "of the input strings is used to determine if the strings are similar in size"
    )

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        if a is None or b is None:
            return 0.0
        longer = max(len(a), len(b))
        if longer == 0:
            return 1.0
        return min(len(a), len(b)) / longer

    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return self.similarity(a, b)

    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        return 0.0


__all__ = [
    "TokenMetric",
    "BlockDistance",
    "EuclideanDistance",
    "CosineSimilarity",
    "DiceSimilarity",
    "JaccardSimilarity",
    "OverlapCoefficient",
    "MatchingCoefficient",
    "QGramsDistance",
    "ChapmanMeanLength",
    "ChapmanLengthDeviation",
]
