"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``.

    ``TASKS_DATA_DIR`` in the environment wins over the platform default.
    """

    platform_id = (platform or sys.platform).lower()
    environ = dict(os.environ if env is None else env)
    override = environ.get("TASKS_DATA_DIR")
    if override:
        return Path(override).expanduser()

    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = home_dir / "Library" / "Application Support"
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return base.expanduser() / sanitized


APP_NAME = "TasksModule"
MODULE_ID = "tasks"
MODULE_NAME = "Tasks"


DATA_DIR = get_default_data_dir(APP_NAME)
LOG_DIR = DATA_DIR / "logs"

for _dir in (DATA_DIR, LOG_DIR):
    _dir.mkdir(parents=True, exist_ok=True)


DB_PATH = DATA_DIR / "tasks.db"
CONFIG_PATH = DATA_DIR / "config.json"
LOG_PATH = LOG_DIR / "tasks.log"


@dataclass(frozen=True)
class RepositorySettings:
    task_list_limit: int = 50
    project_list_limit: int = 50
    daily_log_list_limit: int = 30
    todays_tasks_limit: int = 100
    last_days_default: int = 7


REPOSITORY = RepositorySettings()


@dataclass(frozen=True)
class SearchSettings:
    per_type_limit: int = 20
    max_limit: int = 100
    snippet_length: int = 140
    enforce_total_limit: bool = True
    workers: int = 4
    hrefs: Mapping[str, str] = field(
        default_factory=lambda: {
            "task": "/ui/tasks/my",
            "project": "/ui/tasks/projects",
            "area": "/ui/tasks/areas",
            "daily_log": "/ui/tasks/daily-log",
        }
    )


SEARCH = SearchSettings()


@dataclass(frozen=True)
class LogSettings:
    path: Path = LOG_PATH
    max_bytes: int = 1_000_000
    backup_count: int = 3
    level: str = "INFO"
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


LOGGING = LogSettings()


__all__ = [
    "APP_NAME",
    "MODULE_ID",
    "MODULE_NAME",
    "DATA_DIR",
    "LOG_DIR",
    "DB_PATH",
    "CONFIG_PATH",
    "LOG_PATH",
    "REPOSITORY",
    "SEARCH",
    "LOGGING",
    "RepositorySettings",
    "SearchSettings",
    "LogSettings",
    "get_default_data_dir",
]
