import argparse
import os
import sys
from pathlib import Path
from typing import Sequence

from topwords.config import config_path_from_env, load_config
from topwords.errors import EngineInitializationError, TopwordsError
from topwords.logging_utils import JsonlLogger
from topwords.ranking import format_entry, select_top
from topwords.scheduler import Scheduler
from topwords.tokenizer import initialize_engine


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="topwords",
        description=(
            "Print the ten most frequent words found in the .txt/.TXT files "
            "under the current directory."
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    build_parser().parse_args(argv)

    try:
        initialize_engine()
    except EngineInitializationError:
        print("Regex creation failed.", file=sys.stderr)
        return 1

    try:
        config = load_config(config_path_from_env(dict(os.environ)))
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    logger = JsonlLogger.from_config(config)

    try:
        summary = Scheduler(Path.cwd(), logger=logger).run()
    except TopwordsError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    for entry in select_top(summary.counts):
        print(format_entry(entry))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
