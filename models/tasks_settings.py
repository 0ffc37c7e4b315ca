"""Per-user preferences for the tasks module."""
from __future__ import annotations

from sqlmodel import Field, SQLModel

from utils.datetime_utils import now_ts


class TasksSettings(SQLModel, table=True):
    __tablename__ = "tasks_settings"

    user_id: str = Field(primary_key=True)
    show_completed: bool = False
    compact_mode: bool = False
    notifications: bool = True
    created_at: int = Field(default_factory=now_ts)
    updated_at: int = Field(default_factory=now_ts)


__all__ = ["TasksSettings"]
