"""
Index of coincidence for a single column.

    ioc = sum(count * (count - 1)) / (n * (n - 1))

Two counters share one interface. `DenseCounter` keeps a flat list indexed by
symbol code and clears it after every column, which is what you want for byte
data and small alphabets. `SparseCounter` falls back to `collections.Counter`
for alphabets that are large or have no known bound. Both compute the
numerator as an exact integer, so they always agree.
"""

from abc import ABC, abstractmethod
from collections import Counter

from .settings import DENSE_ALPHABET_LIMIT


def _check_length(n):
    if n < 2:
        raise ValueError(f"index of coincidence needs at least 2 symbols, got {n}")


class CoincidenceCounter(ABC):
    @abstractmethod
    def ioc(self, column):
        """Index of coincidence of `column`, which must hold at least 2 symbols."""


class SparseCounter(CoincidenceCounter):
    def ioc(self, column):
        n = len(column)
        _check_length(n)
        counts = Counter(column).values()
        return sum(x * (x - 1) for x in counts) / (n * (n - 1))


class DenseCounter(CoincidenceCounter):
    def __init__(self, alphabet_size):
        self.alphabet_size = alphabet_size
        self.counts = [0] * alphabet_size

    def ioc(self, column):
        n = len(column)
        _check_length(n)
        counts = self.counts
        # each symbol pairs with every earlier copy of itself
        pairs = 0
        for c in column:
            pairs += counts[c]
            counts[c] += 1
        for c in column:
            counts[c] = 0
        return 2 * pairs / (n * (n - 1))


def counter_for(alphabet_size):
    """Pick a counter for an alphabet of `alphabet_size` codes (None = unknown)."""
    if alphabet_size is not None and alphabet_size <= DENSE_ALPHABET_LIMIT:
        return DenseCounter(alphabet_size)
    return SparseCounter()


def ioc(column):
    return SparseCounter().ioc(column)
