# tasks/models/area.py
from __future__ import annotations

from typing import Optional
import uuid

from sqlmodel import Field, SQLModel

from utils.datetime_utils import now_ts


class Area(SQLModel, table=True):
    """Long-lived area of responsibility; areas never reach a terminal state."""

    __tablename__ = "tasks_areas"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    name: str
    theme_color: Optional[str] = None
    description: Optional[str] = None
    created_at: int = Field(default_factory=now_ts)
    updated_at: int = Field(default_factory=now_ts)


__all__ = ["Area"]
