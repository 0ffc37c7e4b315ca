from __future__ import annotations

from typing import Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from models.records import SettingsRecord, SettingsUpdate
from models.tasks_settings import TasksSettings
from services.base_repository import BaseRepository
from utils.datetime_utils import now_ts


DEFAULTS = {
    "show_completed": False,
    "compact_mode": False,
    "notifications": True,
}

# Dialects with ``INSERT .. ON CONFLICT DO NOTHING``.
_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


def insert_defaults(dialect_name: str, user_id: str, timestamp: int):
    """Build the conditional insert of a default settings row."""

    try:
        insert = _INSERTS[dialect_name]
    except KeyError:
        raise ValueError(f"Unsupported database dialect for settings: {dialect_name}") from None
    return (
        insert(TasksSettings)
        .values(user_id=user_id, created_at=timestamp, updated_at=timestamp, **DEFAULTS)
        .on_conflict_do_nothing(index_elements=["user_id"])
    )


class SettingsRepository(BaseRepository):
    """Single preferences row per user, created on first read."""

    model = TasksSettings
    log_name = "settings"

    def _to_record(self, row: TasksSettings) -> SettingsRecord:
        return SettingsRecord(
            user_id=row.user_id,
            show_completed=bool(row.show_completed),
            compact_mode=bool(row.compact_mode),
            notifications=bool(row.notifications),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def get_by_user_id(self, user_id: str) -> SettingsRecord:
        with self._session_factory() as session:
            stmt = insert_defaults(session.get_bind().dialect.name, user_id, now_ts())
            inserted = session.exec(stmt).rowcount
            session.commit()
            row = self._first(session, user_id)
            record = self._to_record(row)
        if inserted:
            self.logger.debug("Settings created with defaults for user %s", user_id)
        return record

    def update(self, user_id: str, changes: SettingsUpdate) -> Optional[SettingsRecord]:
        return self._update(user_id, changes.changes())


__all__ = ["DEFAULTS", "SettingsRepository", "insert_defaults"]
