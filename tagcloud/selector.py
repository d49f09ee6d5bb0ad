from __future__ import annotations

from typing import Dict, List, NamedTuple, Sequence


class FrequencyEntry(NamedTuple):
    word: str
    count: int


def sort_by_count(freqs: Dict[str, int]) -> List[FrequencyEntry]:
    """
    Runtime Complexity: O(U log U), where U is the number of distinct words.
    Materializes the mapping as entries in descending count order; equal
    counts fall back to alphabetical order so the cut made by find_top_n
    does not depend on dictionary iteration order.
    """
    entries = [FrequencyEntry(word, count) for word, count in freqs.items()]
    entries.sort(key=lambda e: (-e.count, e.word))
    return entries


def find_top_n(entries: Sequence[FrequencyEntry], n: int) -> List[FrequencyEntry]:
    """
    Runtime Complexity: O(min(N, U)). Returns a new list holding the first
    min(n, len(entries)) entries of `entries`, which must already be sorted
    by descending count. `entries` is left untouched.
    """
    if n <= 0:
        return []
    return list(entries[:n])


def max_count(freqs: Dict[str, int]) -> int:
    return max(freqs.values(), default=0)
