import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from topwords.config import AppConfig


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JsonlLogger:
    """Appends scan events to ``scan-<timestamp>.jsonl`` under ``log_dir``.

    Only run metadata is written; word counts and per-file failures never are.
    """

    def __init__(self, log_dir: Path) -> None:
        self.log_dir = log_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = _utcnow().strftime("%Y%m%dT%H%M%S%fZ")
        self.path = self.log_dir / f"scan-{timestamp}.jsonl"

    @classmethod
    def from_config(cls, config: AppConfig) -> Optional["JsonlLogger"]:
        if config.log_dir is None:
            return None
        return cls(log_dir=config.log_dir)

    def log(self, event: str, payload: dict[str, Any]) -> None:
        record = {
            "event": event,
            "timestamp": _utcnow().isoformat().replace("+00:00", "Z"),
            "payload": payload,
        }
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record) + "\n")

    def log_dataclass(self, event: str, payload: Any) -> None:
        self.log(event, asdict(payload))
