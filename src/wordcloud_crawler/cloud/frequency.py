"""
Term frequency aggregation for the word cloud.
"""
import threading
from functools import total_ordering

from nltk.probability import FreqDist


@total_ordering
class FrequencyEntry:
    """
    A (term, count) pair.

    Entries sort by descending count, ties broken by ascending term, so a
    sorted list of entries is already in word cloud order.
    """
    __slots__ = ('term', 'count')

    def __init__(self, term, count):
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count} for {term!r}")
        self.term = term
        self.count = count

    def sort_key(self):
        return (-self.count, self.term)

    def __eq__(self, other):
        if isinstance(other, FrequencyEntry):
            return (self.term, self.count) == (other.term, other.count)
        if isinstance(other, tuple):
            return (self.term, self.count) == other
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, FrequencyEntry):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self):
        return hash((self.term, self.count))

    def __iter__(self):
        yield self.term
        yield self.count

    def __repr__(self):
        return f"FrequencyEntry({self.term!r}, {self.count})"

    def __str__(self):
        return f"{self.term}: {self.count}"


class FrequencyIndex:
    """
    Thread-safe term -> count table. Counts only ever grow.
    """
    def __init__(self):
        self._counts = FreqDist()
        self._lock = threading.Lock()

    def add(self, tokens):
        """Count each token once."""
        tokens = list(tokens)
        with self._lock:
            self._counts.update(tokens)

    def merge(self, counts):
        """Add a term -> count mapping (e.g. a worker's FreqDist)."""
        items = list(counts.items())
        for term, count in items:
            if count < 0:
                raise ValueError(f"negative count {count} for {term!r}")

        with self._lock:
            for term, count in items:
                if count:
                    self._counts[term] += count

    def count(self, term):
        with self._lock:
            return self._counts[term]

    def total(self):
        """Number of tokens counted."""
        with self._lock:
            return self._counts.N()

    def __len__(self):
        with self._lock:
            return self._counts.B()

    def __contains__(self, term):
        with self._lock:
            return self._counts[term] > 0

    def top(self, k, min_count=1):
        """
        The k most frequent terms with at least min_count occurrences.

        Returns:
            list[FrequencyEntry]: at most k entries in word cloud order
        """
        if k <= 0:
            return []
        min_count = max(min_count, 1)
        with self._lock:
            entries = [
                FrequencyEntry(term, count)
                for term, count in self._counts.items()
                if count >= min_count
            ]
        entries.sort()
        return entries[:k]
