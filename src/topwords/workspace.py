from pathlib import Path
from typing import FrozenSet, Iterator

# Literal suffixes only: "a.Txt" is not a corpus file.
EXTENSIONS: FrozenSet[str] = frozenset({".txt", ".TXT"})


def is_candidate(path: Path) -> bool:
    return path.suffix in EXTENSIONS


class WorkspaceScanner:
    def __init__(self, root: Path) -> None:
        self.root = root

    def entries(self) -> Iterator[Path]:
        # rglob visits each descendant once and does not follow directory symlinks.
        return self.root.rglob("*")

    def candidates(self) -> Iterator[Path]:
        for path in self.entries():
            if is_candidate(path):
                yield path
