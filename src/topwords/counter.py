from pathlib import Path

from topwords.models import WordFrequencyMap
from topwords.tokenizer import Tokenizer


def count_file(path: Path) -> WordFrequencyMap:
    """Count the words of one file.

    Anything that is not a readable regular file contributes an empty map,
    including entries that cannot be stat'ed and reads that fail part way;
    invalid UTF-8 is replaced rather than rejected.
    """
    counts: WordFrequencyMap = {}
    tokenizer = Tokenizer()
    try:
        if not path.is_file():
            return {}
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            for line in handle:
                for word in tokenizer.tokens(line):
                    counts[word] = counts.get(word, 0) + 1
    except OSError:
        return {}
    return counts
