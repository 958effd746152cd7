# frequency_ranker.py
# Top-k words by occurrence count.
# Ordering is total: count descending, then word ascending, so ties
# always come out the same way.

from __future__ import annotations
from typing import List, Mapping, Tuple

Candidate = Tuple[str, int]


class InvalidArgument(ValueError):
    """Raised when a ranking argument is out of range."""


class FrequencyRanker:
    """
    Ranks the words of a count table (normally Trie.word_counts).
    The table is read live, never copied, so later inserts show up.
    """

    def __init__(self, counts: Mapping[str, int]) -> None:
        self.counts = counts

    def top_k(self, k: int) -> List[Candidate]:
        """
        Return the first min(k, distinct words) entries as (word, count).
        k == 0 -> []. Negative or non-integer k raises InvalidArgument.
        """
        if isinstance(k, bool) or not isinstance(k, int):
            raise InvalidArgument(f"k must be an integer, got {k!r}")
        if k < 0:
            raise InvalidArgument(f"k must be >= 0, got {k}")
        if k == 0:
            return []
        ranked = sorted(self.counts.items(), key=lambda t: (-t[1], t[0]))
        return ranked[:k]

    def most_common(self) -> List[Candidate]:
        """Every word in ranked order."""
        return self.top_k(len(self.counts))
