import heapq
from typing import List

from topwords.models import RankedEntry, WordFrequencyMap

TOP_N = 10


def select_top(counts: WordFrequencyMap, limit: int = TOP_N) -> List[RankedEntry]:
    """Return the ``limit`` most frequent words, highest count first.

    Only the count takes part in the ordering, so words with equal counts
    come out in no particular order.
    """
    size = min(limit, len(counts))
    if size <= 0:
        return []
    best = heapq.nlargest(size, counts.items(), key=lambda item: item[1])
    return [RankedEntry(word=word, count=count) for word, count in best]


def format_entry(entry: RankedEntry) -> str:
    return f"{entry.count} {entry.word}"
