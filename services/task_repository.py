from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import and_, or_

from core.enums import TASK_DONE
from core.settings import REPOSITORY
from models.records import TaskCreate, TaskRecord, TaskUpdate
from models.task import Task
from services.base_repository import BaseRepository
from services.context_codec import decode_context, encode_context
from utils.datetime_utils import day_bounds


class TaskRepository(BaseRepository):
    model = Task
    log_name = "tasks"

    def _to_record(self, row: Task) -> TaskRecord:
        return TaskRecord(
            id=row.id,
            user_id=row.user_id,
            title=row.title,
            description=row.description or None,
            status=row.status,
            priority=row.priority,
            due_date=row.due_date,
            do_date=row.do_date,
            effort=row.effort,
            context=decode_context(row.context),
            is_completed=bool(row.is_completed),
            project_id=row.project_id or None,
            area_id=row.area_id or None,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_columns(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        if "context" in changes:
            changes["context"] = encode_context(changes["context"])
        return changes

    def get_by_user_id(self, user_id: str, limit: int = REPOSITORY.task_list_limit) -> List[TaskRecord]:
        return self._list(
            user_id,
            order_by=(Task.created_at.desc(), Task.id),
            limit=limit,
        )

    def get_by_id(self, task_id: str, user_id: str) -> Optional[TaskRecord]:
        return self._get(user_id, Task.id == task_id)

    def get_by_project_id(self, project_id: str, user_id: str) -> List[TaskRecord]:
        return self._list(user_id, Task.project_id == project_id, order_by=(Task.created_at.desc(),))

    def get_by_area_id(self, area_id: str, user_id: str) -> List[TaskRecord]:
        return self._list(user_id, Task.area_id == area_id, order_by=(Task.created_at.desc(),))

    def get_todays_tasks(
        self,
        user_id: str,
        reference_ts: int,
        limit: int = REPOSITORY.todays_tasks_limit,
    ) -> List[TaskRecord]:
        """Tasks due or planned within the UTC day containing ``reference_ts``."""

        start, end = day_bounds(reference_ts)
        in_day = or_(
            and_(Task.due_date >= start, Task.due_date < end),
            and_(Task.do_date >= start, Task.do_date < end),
        )
        return self._list(
            user_id,
            in_day,
            order_by=(Task.due_date.asc(), Task.do_date.asc(), Task.created_at.desc()),
            limit=limit,
        )

    def create(self, data: TaskCreate) -> TaskRecord:
        task = Task(
            user_id=data.user_id,
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            due_date=data.due_date,
            do_date=data.do_date,
            effort=data.effort,
            context=encode_context(data.context),
            is_completed=data.is_completed,
            project_id=data.project_id,
            area_id=data.area_id,
        )
        return self._insert(task)

    def update(self, task_id: str, user_id: str, changes: TaskUpdate) -> Optional[TaskRecord]:
        return self._update(user_id, changes.changes(), Task.id == task_id)

    def delete(self, task_id: str, user_id: str) -> bool:
        return self._delete(user_id, Task.id == task_id)

    def complete_task(self, task_id: str, user_id: str) -> Optional[TaskRecord]:
        return self.update(task_id, user_id, TaskUpdate(is_completed=True, status=TASK_DONE))

    def count_by_status(self, user_id: str, status: str) -> int:
        return self._count(user_id, Task.status == status)

    def search_by_user_id(self, user_id: str, query: str, limit: int) -> List[TaskRecord]:
        return self._search(user_id, query, (Task.title, Task.description), limit)


__all__ = ["TaskRepository"]
