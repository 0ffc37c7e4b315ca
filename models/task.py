# tasks/models/task.py
from typing import Optional
import uuid

from sqlmodel import SQLModel, Field

from core.enums import DEFAULT_TASK_PRIORITY, DEFAULT_TASK_STATUS
from utils.datetime_utils import now_ts


class Task(SQLModel, table=True):
    __tablename__ = "tasks_tasks"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    title: str
    description: Optional[str] = None
    status: str = Field(default=DEFAULT_TASK_STATUS, index=True)   # to_do / in_progress / waiting / done / archived
    priority: str = DEFAULT_TASK_PRIORITY                           # high / medium / low
    due_date: Optional[int] = None
    do_date: Optional[int] = None
    effort: Optional[int] = None          # minutes or story points
    context: Optional[str] = None         # serialized tag list, see services.context_codec
    is_completed: bool = False
    project_id: Optional[str] = Field(default=None, index=True)
    area_id: Optional[str] = Field(default=None, index=True)
    created_at: int = Field(default_factory=now_ts)
    updated_at: int = Field(default_factory=now_ts)
