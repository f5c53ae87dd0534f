from topwords.models import WordFrequencyMap


def merge_counts(total: WordFrequencyMap, partial: WordFrequencyMap) -> None:
    # Only the draining thread calls this, so the total map needs no lock.
    for word, count in partial.items():
        total[word] = total.get(word, 0) + count
