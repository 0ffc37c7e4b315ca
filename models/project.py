# tasks/models/project.py
from __future__ import annotations

from typing import Optional
import uuid

from sqlmodel import Field, SQLModel

from core.enums import DEFAULT_PROJECT_STATUS
from utils.datetime_utils import now_ts


class Project(SQLModel, table=True):
    __tablename__ = "tasks_projects"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    name: str
    status: str = Field(default=DEFAULT_PROJECT_STATUS)
    description: Optional[str] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    area_id: Optional[str] = Field(default=None, index=True)
    created_at: int = Field(default_factory=now_ts)
    updated_at: int = Field(default_factory=now_ts)


__all__ = ["Project"]
