from concurrent.futures import Future
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

WordFrequencyMap = Dict[str, int]


@dataclass(frozen=True)
class RankedEntry:
    word: str
    count: int


@dataclass
class PendingTask:
    sequence: int
    path: Path
    future: "Future[WordFrequencyMap]"


@dataclass
class ScanStats:
    root: str
    parallelism: int
    files_submitted: int
    distinct_words: int
    max_pending: int
    seconds: float


@dataclass
class ScanSummary:
    root: Path
    parallelism: int
    counts: WordFrequencyMap = field(default_factory=dict)
    # Diagnostic: merge order of every file, kept for the whole run.
    drained: List[Path] = field(default_factory=list)
    files_submitted: int = 0
    max_pending: int = 0
    seconds: float = 0.0

    @property
    def distinct_words(self) -> int:
        return len(self.counts)

    def stats(self) -> ScanStats:
        return ScanStats(
            root=str(self.root),
            parallelism=self.parallelism,
            files_submitted=self.files_submitted,
            distinct_words=self.distinct_words,
            max_pending=self.max_pending,
            seconds=self.seconds,
        )
