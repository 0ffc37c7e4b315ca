"""Plain record shapes returned by the repositories, plus their inputs.

Repositories never hand out live ORM rows. Reads produce the ``*Record``
dataclasses below; writes accept a ``*Create`` input or a ``*Update``
partial-update structure.

Update structures default every field to :data:`UNSET` so that "leave the
column alone" and "set the column to ``None``" stay distinguishable.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from core.enums import (
    DEFAULT_PROJECT_STATUS,
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
)


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _Serializable:
    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase mapping an HTTP layer would serialize."""

        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


class _PartialUpdate:
    def changes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()


# ---------------------------------------------------------------- records
@dataclass
class TaskRecord(_Serializable):
    id: str
    user_id: str
    title: str
    status: str
    priority: str
    is_completed: bool
    created_at: int
    updated_at: int
    description: Optional[str] = None
    due_date: Optional[int] = None
    do_date: Optional[int] = None
    effort: Optional[int] = None
    context: List[str] = field(default_factory=list)
    project_id: Optional[str] = None
    area_id: Optional[str] = None


@dataclass
class ProjectRecord(_Serializable):
    id: str
    user_id: str
    name: str
    status: str
    created_at: int
    updated_at: int
    description: Optional[str] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    area_id: Optional[str] = None


@dataclass
class AreaRecord(_Serializable):
    id: str
    user_id: str
    name: str
    created_at: int
    updated_at: int
    theme_color: Optional[str] = None
    description: Optional[str] = None


@dataclass
class DailyLogRecord(_Serializable):
    id: str
    user_id: str
    log_date: int
    morning_routine: bool
    evening_routine: bool
    created_at: int
    updated_at: int
    mood: Optional[str] = None
    sleep_hours: Optional[float] = None
    notes: Optional[str] = None


@dataclass
class SettingsRecord(_Serializable):
    user_id: str
    show_completed: bool
    compact_mode: bool
    notifications: bool
    created_at: int
    updated_at: int


# ---------------------------------------------------------------- inputs
@dataclass
class TaskCreate:
    user_id: str
    title: str
    description: Optional[str] = None
    status: str = DEFAULT_TASK_STATUS
    priority: str = DEFAULT_TASK_PRIORITY
    due_date: Optional[int] = None
    do_date: Optional[int] = None
    effort: Optional[int] = None
    context: Optional[List[str]] = None
    is_completed: bool = False
    project_id: Optional[str] = None
    area_id: Optional[str] = None


@dataclass
class ProjectCreate:
    user_id: str
    name: str
    status: str = DEFAULT_PROJECT_STATUS
    description: Optional[str] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    area_id: Optional[str] = None


@dataclass
class AreaCreate:
    user_id: str
    name: str
    theme_color: Optional[str] = None
    description: Optional[str] = None


@dataclass
class DailyLogCreate:
    user_id: str
    log_date: int
    mood: Optional[str] = None
    sleep_hours: Optional[float] = None
    morning_routine: bool = False
    evening_routine: bool = False
    notes: Optional[str] = None


# ---------------------------------------------------------------- updates
@dataclass
class TaskUpdate(_PartialUpdate):
    title: Any = UNSET
    description: Any = UNSET
    status: Any = UNSET
    priority: Any = UNSET
    due_date: Any = UNSET
    do_date: Any = UNSET
    effort: Any = UNSET
    context: Any = UNSET
    is_completed: Any = UNSET
    project_id: Any = UNSET
    area_id: Any = UNSET


@dataclass
class ProjectUpdate(_PartialUpdate):
    name: Any = UNSET
    status: Any = UNSET
    description: Any = UNSET
    start_date: Any = UNSET
    end_date: Any = UNSET
    area_id: Any = UNSET


@dataclass
class AreaUpdate(_PartialUpdate):
    name: Any = UNSET
    theme_color: Any = UNSET
    description: Any = UNSET


@dataclass
class DailyLogUpdate(_PartialUpdate):
    mood: Any = UNSET
    sleep_hours: Any = UNSET
    morning_routine: Any = UNSET
    evening_routine: Any = UNSET
    notes: Any = UNSET


@dataclass
class SettingsUpdate(_PartialUpdate):
    show_completed: Any = UNSET
    compact_mode: Any = UNSET
    notifications: Any = UNSET


__all__ = [
    "UNSET",
    "TaskRecord",
    "ProjectRecord",
    "AreaRecord",
    "DailyLogRecord",
    "SettingsRecord",
    "TaskCreate",
    "ProjectCreate",
    "AreaCreate",
    "DailyLogCreate",
    "TaskUpdate",
    "ProjectUpdate",
    "AreaUpdate",
    "DailyLogUpdate",
    "SettingsUpdate",
]
