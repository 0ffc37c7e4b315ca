from __future__ import annotations

from typing import List, Optional

from core.enums import PROJECT_ACTIVE
from core.settings import REPOSITORY
from models.project import Project
from models.records import ProjectCreate, ProjectRecord, ProjectUpdate
from services.base_repository import BaseRepository


class ProjectRepository(BaseRepository):
    model = Project
    log_name = "projects"

    def _to_record(self, row: Project) -> ProjectRecord:
        return ProjectRecord(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            status=row.status,
            description=row.description or None,
            start_date=row.start_date,
            end_date=row.end_date,
            area_id=row.area_id or None,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def get_by_user_id(self, user_id: str, limit: int = REPOSITORY.project_list_limit) -> List[ProjectRecord]:
        return self._list(user_id, order_by=(Project.created_at.desc(), Project.id), limit=limit)

    def get_by_id(self, project_id: str, user_id: str) -> Optional[ProjectRecord]:
        return self._get(user_id, Project.id == project_id)

    def get_by_area_id(self, area_id: str, user_id: str) -> List[ProjectRecord]:
        return self._list(user_id, Project.area_id == area_id, order_by=(Project.created_at.desc(),))

    def get_active_projects(self, user_id: str) -> List[ProjectRecord]:
        return self._list(user_id, Project.status == PROJECT_ACTIVE, order_by=(Project.created_at.desc(),))

    def count_by_status(self, user_id: str, status: str) -> int:
        return self._count(user_id, Project.status == status)

    def create(self, data: ProjectCreate) -> ProjectRecord:
        project = Project(
            user_id=data.user_id,
            name=data.name,
            status=data.status,
            description=data.description,
            start_date=data.start_date,
            end_date=data.end_date,
            area_id=data.area_id,
        )
        return self._insert(project)

    def update(self, project_id: str, user_id: str, changes: ProjectUpdate) -> Optional[ProjectRecord]:
        return self._update(user_id, changes.changes(), Project.id == project_id)

    def delete(self, project_id: str, user_id: str) -> bool:
        # Tasks pointing at this project keep their (now dangling) project_id.
        return self._delete(user_id, Project.id == project_id)

    def search_by_user_id(self, user_id: str, query: str, limit: int) -> List[ProjectRecord]:
        return self._search(user_id, query, (Project.name, Project.description), limit)


__all__ = ["ProjectRepository"]
