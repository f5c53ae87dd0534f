import re
import threading
from typing import Iterator, Optional, Pattern

from topwords.errors import EngineInitializationError

MIN_WORD_LENGTH = 2
WORD_PATTERN = rf"[a-z]{{{MIN_WORD_LENGTH},}}"
# ASCII keeps case folding from matching non-ASCII letters such as the Kelvin sign.
WORD_FLAGS = re.IGNORECASE | re.ASCII

_engine_lock = threading.Lock()
_engine: Optional[Pattern[str]] = None


def initialize_engine() -> Pattern[str]:
    """Compile the word pattern once before any worker thread starts.

    Safe to call repeatedly and from several threads; only the first call
    compiles. Raises EngineInitializationError when the pattern is rejected.
    """
    global _engine
    with _engine_lock:
        if _engine is None:
            try:
                _engine = re.compile(WORD_PATTERN, WORD_FLAGS)
            except re.error as exc:
                raise EngineInitializationError(f"Regex creation failed: {exc}") from exc
        return _engine


class Tokenizer:
    """Splits text lines into lower-cased runs of two or more ASCII letters.

    Each counting task builds its own instance.
    """

    def __init__(self) -> None:
        self.pattern = initialize_engine()

    def tokens(self, line: str) -> Iterator[str]:
        for match in self.pattern.finditer(line):
            yield match.group(0).lower()


def tokenize(line: str) -> Iterator[str]:
    return Tokenizer().tokens(line)
