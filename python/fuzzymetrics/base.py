"""The contract every string metric implements.

Subclasses provide ``similarity``, ``unnormalized_similarity`` and
``estimated_cost``; batch comparison, timing and the (unsupported)
explanation hook are shared here.

Metric instances are immutable once constructed. Intermediate token counts
are created per call, so one instance may be used from several threads.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from fuzzymetrics.exceptions import ValidationError

logger = logging.getLogger(__name__)


class StringMetric(ABC):
    """Base class for all similarity metrics.

    Attributes:
        name: Short identifier of the metric.
        description: Human-readable summary of what the metric measures.
    """

    name: str = "StringMetric"
    description: str = ""

    @abstractmethod
    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """Normalized similarity in ``[0.0, 1.0]``; 0.0 when either input is None."""

    @abstractmethod
    def unnormalized_similarity(self, a: Optional[str], b: Optional[str]) -> float:
        """Raw algorithm output before it is mapped into ``[0.0, 1.0]``."""

    @abstractmethod
    def estimated_cost(self, a: Optional[str], b: Optional[str]) -> float:
        """Predicted running time of ``similarity(a, b)`` in milliseconds.

        This is a fitted polynomial in the input sizes, meant for choosing
        between metrics before running them.
        """

    def explain(self, a: Optional[str], b: Optional[str]) -> str:
        """Explanations are not supported by any metric.

        Raises:
            NotImplementedError: Always.
        """
        raise NotImplementedError(f"{self.name} does not support explanations")

    def measure_cost(self, a: Optional[str], b: Optional[str]) -> float:
        """Run ``similarity(a, b)`` once and return the elapsed time in milliseconds."""
        start = time.perf_counter()
        self.similarity(a, b)
        elapsed = (time.perf_counter() - start) * 1000.0
        logger.debug("%s took %.3fms", self.name, elapsed)
        return elapsed

    def batch_compare(self, strings: Sequence[Optional[str]], comparator: Optional[str]) -> List[float]:
        """Compare every element of ``strings`` against ``comparator``.

        Raises:
            ValidationError: If ``strings`` or ``comparator`` is None.
        """
        if strings is None or comparator is None:
            raise ValidationError("strings and comparator must not be None")
        return [self.similarity(s, comparator) for s in strings]

    def batch_compare_all(
        self,
        first: Sequence[Optional[str]],
        second: Sequence[Optional[str]],
    ) -> List[float]:
        """Compare ``first[i]`` with ``second[i]``.

        The result has the length of the shorter sequence; extra elements of
        the longer one are ignored.

        Raises:
            ValidationError: If either sequence is None.
        """
        if first is None or second is None:
            raise ValidationError("both sequences must not be None")
        return [self.similarity(a, b) for a, b in zip(first, second)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["StringMetric"]
