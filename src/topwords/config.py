import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

CONFIG_ENV_VAR = "TOPWORDS_CONFIG"


@dataclass
class AppConfig:
    log_dir: Optional[Path]


DEFAULT_CONFIG = AppConfig(log_dir=None)


def load_config(path: Optional[Path]) -> AppConfig:
    if path is None or not path.exists():
        return DEFAULT_CONFIG
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    log_dir = data.get("log_dir", DEFAULT_CONFIG.log_dir)
    return AppConfig(log_dir=Path(log_dir) if log_dir else None)


def config_path_from_env(environ: dict[str, str]) -> Optional[Path]:
    value = environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None
