import os
import time
from collections import deque
from concurrent.futures import Executor, ProcessPoolExecutor
from pathlib import Path
from typing import Callable, Deque, Optional

from topwords.counter import count_file
from topwords.errors import ParallelismUnavailableError
from topwords.logging_utils import JsonlLogger
from topwords.merger import merge_counts
from topwords.models import PendingTask, ScanSummary, WordFrequencyMap
from topwords.workspace import WorkspaceScanner

FileCounter = Callable[[Path], WordFrequencyMap]
ExecutorFactory = Callable[..., Executor]


def host_parallelism() -> int:
    count = os.cpu_count()
    if count is None or count < 1:
        raise ParallelismUnavailableError("Unable to determine the number of CPUs")
    return count


class Scheduler:
    """Counts every corpus file under ``root`` with a bounded number in flight.

    Pending tasks form a FIFO window of at most ``parallelism + 1`` entries.
    When a submission overflows it, the controlling thread waits for the
    oldest submitted task, even if newer ones have already finished, merges
    its result and only then resumes the directory walk.

    Counting is CPU bound, so files are counted in worker processes by
    default; ``counter`` must then be a picklable module-level function.
    """

    def __init__(
        self,
        root: Path,
        parallelism: Optional[int] = None,
        counter: FileCounter = count_file,
        logger: Optional[JsonlLogger] = None,
        executor_factory: ExecutorFactory = ProcessPoolExecutor,
    ) -> None:
        self.root = root
        self.parallelism = host_parallelism() if parallelism is None else parallelism
        if self.parallelism < 1:
            raise ParallelismUnavailableError(f"Invalid parallelism: {self.parallelism}")
        self.counter = counter
        self.logger = logger
        self.executor_factory = executor_factory
        self.scanner = WorkspaceScanner(root)

    @property
    def queue_bound(self) -> int:
        return self.parallelism + 1

    def run(self) -> ScanSummary:
        started = time.monotonic()
        summary = ScanSummary(root=self.root, parallelism=self.parallelism)
        pending: Deque[PendingTask] = deque()
        if self.logger:
            self.logger.log(
                "scan_started",
                {"root": str(self.root), "parallelism": self.parallelism},
            )

        # One worker per slot the window can hold, so a submission never waits for a worker.
        with self.executor_factory(max_workers=self.queue_bound + 1) as executor:
            for path in self.scanner.candidates():
                future = executor.submit(self.counter, path)
                pending.append(
                    PendingTask(sequence=summary.files_submitted, path=path, future=future)
                )
                summary.files_submitted += 1
                summary.max_pending = max(summary.max_pending, len(pending))
                while len(pending) > self.queue_bound:
                    self._drain_oldest(pending, summary)
            while pending:
                self._drain_oldest(pending, summary)

        summary.seconds = round(time.monotonic() - started, 3)
        if self.logger:
            self.logger.log_dataclass("scan_finished", summary.stats())
        return summary

    def _drain_oldest(self, pending: Deque[PendingTask], summary: ScanSummary) -> None:
        task = pending[0]
        partial = task.future.result()
        pending.popleft()
        merge_counts(summary.counts, partial)
        summary.drained.append(task.path)
