# tasks/models/daily_log.py
from __future__ import annotations

from typing import Optional
import uuid

from sqlmodel import Field, SQLModel

from utils.datetime_utils import now_ts


class DailyLog(SQLModel, table=True):
    """One journal row per user and calendar day.

    Uniqueness of ``(user_id, log_date)`` is a convention of the callers, the
    table does not enforce it.
    """

    __tablename__ = "tasks_daily_log"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    log_date: int = Field(index=True)
    mood: Optional[str] = None
    sleep_hours: Optional[float] = None
    morning_routine: bool = False
    evening_routine: bool = False
    notes: Optional[str] = None
    created_at: int = Field(default_factory=now_ts)
    updated_at: int = Field(default_factory=now_ts)


__all__ = ["DailyLog"]
