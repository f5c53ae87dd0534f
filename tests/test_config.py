import json
from pathlib import Path

import pytest

from topwords.config import (
    AppConfig,
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    config_path_from_env,
    load_config,
)
from topwords.logging_utils import JsonlLogger
from topwords.models import ScanSummary


def test_load_config_defaults(tmp_path: Path) -> None:
    assert load_config(None) == DEFAULT_CONFIG
    assert load_config(tmp_path / "missing.json") == DEFAULT_CONFIG
    assert DEFAULT_CONFIG.log_dir is None


def test_load_config_reads_log_dir(tmp_path: Path) -> None:
    path = tmp_path / "topwords.json"
    path.write_text(json.dumps({"log_dir": str(tmp_path / "logs")}), encoding="utf-8")
    assert load_config(path).log_dir == tmp_path / "logs"


def test_load_config_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "topwords.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid config file"):
        load_config(path)
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_config(path)


def test_config_path_from_env() -> None:
    assert config_path_from_env({}) is None
    assert config_path_from_env({CONFIG_ENV_VAR: ""}) is None
    assert config_path_from_env({CONFIG_ENV_VAR: "cfg.json"}) == Path("cfg.json")


def test_jsonl_logger_appends_records(tmp_path: Path) -> None:
    logger = JsonlLogger(log_dir=tmp_path / "logs")
    logger.log("scan_started", {"root": "."})
    logger.log("scan_finished", {"files_submitted": 2})
    records = [json.loads(line) for line in logger.path.read_text(encoding="utf-8").splitlines()]
    assert [record["event"] for record in records] == ["scan_started", "scan_finished"]
    assert records[1]["payload"] == {"files_submitted": 2}
    assert records[0]["timestamp"].endswith("Z")


def test_jsonl_logger_serializes_scan_stats(tmp_path: Path) -> None:
    summary = ScanSummary(root=tmp_path, parallelism=4, counts={"cat": 2, "dog": 1})
    summary.files_submitted = 3
    summary.max_pending = 3
    logger = JsonlLogger(log_dir=tmp_path / "logs")

    logger.log_dataclass("scan_finished", summary.stats())

    (record,) = [json.loads(line) for line in logger.path.read_text(encoding="utf-8").splitlines()]
    assert record["event"] == "scan_finished"
    assert record["payload"] == {
        "root": str(tmp_path),
        "parallelism": 4,
        "files_submitted": 3,
        "distinct_words": 2,
        "max_pending": 3,
        "seconds": 0.0,
    }


def test_jsonl_logger_from_config(tmp_path: Path) -> None:
    assert JsonlLogger.from_config(DEFAULT_CONFIG) is None
    logger = JsonlLogger.from_config(AppConfig(log_dir=tmp_path / "logs"))
    assert logger is not None
    assert logger.path.parent == tmp_path / "logs"
    assert logger.path.name.startswith("scan-")
