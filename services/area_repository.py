from __future__ import annotations

from typing import List, Optional

from models.area import Area
from models.records import AreaCreate, AreaRecord, AreaUpdate
from services.base_repository import BaseRepository


class AreaRepository(BaseRepository):
    model = Area
    log_name = "areas"

    def _to_record(self, row: Area) -> AreaRecord:
        return AreaRecord(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            theme_color=row.theme_color or None,
            description=row.description or None,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def get_by_user_id(self, user_id: str) -> List[AreaRecord]:
        return self._list(user_id, order_by=(Area.created_at.asc(), Area.name.asc()))

    def get_by_id(self, area_id: str, user_id: str) -> Optional[AreaRecord]:
        return self._get(user_id, Area.id == area_id)

    def create(self, data: AreaCreate) -> AreaRecord:
        area = Area(
            user_id=data.user_id,
            name=data.name,
            theme_color=data.theme_color,
            description=data.description,
        )
        return self._insert(area)

    def update(self, area_id: str, user_id: str, changes: AreaUpdate) -> Optional[AreaRecord]:
        return self._update(user_id, changes.changes(), Area.id == area_id)

    def delete(self, area_id: str, user_id: str) -> bool:
        # No cascade: projects and tasks referencing the area are left untouched.
        return self._delete(user_id, Area.id == area_id)

    def search_by_user_id(self, user_id: str, query: str, limit: int) -> List[AreaRecord]:
        return self._search(user_id, query, (Area.name, Area.description), limit)


__all__ = ["AreaRepository"]
