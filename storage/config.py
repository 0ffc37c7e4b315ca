"""Simple JSON-backed configuration store."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from core.settings import CONFIG_PATH, DB_PATH, LOGGING


def default_database_url() -> str:
    return f"sqlite:///{DB_PATH.as_posix()}"


@dataclass
class AppConfig:
    """Lightweight configuration persisted to ``config.json``."""

    database_url: Optional[str] = None
    log_level: str = LOGGING.level

    def resolved_database_url(self) -> str:
        return self.database_url or default_database_url()


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _load_raw(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_config(path: Optional[Path] = None) -> AppConfig:
    target = path or CONFIG_PATH
    data = _load_raw(target)
    return AppConfig(
        database_url=data.get("database_url") or None,
        log_level=str(data.get("log_level") or LOGGING.level).upper(),
    )


def save_config(config: AppConfig, path: Optional[Path] = None) -> None:
    target = path or CONFIG_PATH
    _ensure_parent(target)
    payload = json.dumps(asdict(config), ensure_ascii=False, indent=2, sort_keys=True)
    tmp = target.with_suffix(".tmp")
    try:
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(target)
    finally:
        if tmp.exists():
            try:
                tmp.unlink()
            except OSError:
                pass


def update_config(path: Optional[Path] = None, **changes: Any) -> AppConfig:
    target = path or CONFIG_PATH
    cfg = load_config(target)
    for key, value in changes.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)
    save_config(cfg, target)
    return cfg


__all__ = [
    "AppConfig",
    "default_database_url",
    "load_config",
    "save_config",
    "update_config",
]
