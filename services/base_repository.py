"""Shared plumbing for the user-scoped repositories.

Every statement built here conjoins the target key with ``user_id``; a row
owned by someone else is indistinguishable from a missing one.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from sqlalchemy import func, or_
from sqlmodel import Session, SQLModel, select

from core.log import get_logger
from storage.db import get_session
from utils.datetime_utils import now_ts


def escape_like(value: str, escape: str = "\\") -> str:
    return (
        value.replace(escape, escape * 2)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )


class BaseRepository:
    model: type = SQLModel
    log_name = "repository"

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self._session_factory = session_factory or get_session
        self.logger = get_logger(self.log_name)

    # ----- hooks -----
    def _to_record(self, row: Any) -> Any:
        raise NotImplementedError

    def _to_columns(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Translate update fields into column values (e.g. encode tags)."""
        return changes

    # ----- statements -----
    def _owned(self, user_id: str, *criteria):
        return select(self.model).where(self.model.user_id == user_id, *criteria)

    def _first(self, session: Session, user_id: str, *criteria):
        return session.exec(self._owned(user_id, *criteria).limit(1)).first()

    def _list(
        self,
        user_id: str,
        *criteria,
        order_by: Sequence[Any] = (),
        limit: Optional[int] = None,
    ) -> List[Any]:
        stmt = self._owned(user_id, *criteria)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        with self._session_factory() as session:
            rows = list(session.exec(stmt))
        return [self._to_record(row) for row in rows]

    def _get(self, user_id: str, *criteria) -> Optional[Any]:
        with self._session_factory() as session:
            row = self._first(session, user_id, *criteria)
            return self._to_record(row) if row else None

    def _insert(self, row: SQLModel) -> Any:
        with self._session_factory() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            record = self._to_record(row)
        self.logger.debug("%s created: %s", self.model.__name__, _key_of(record))
        return record

    def _update(self, user_id: str, changes: Dict[str, Any], *criteria) -> Optional[Any]:
        values = self._to_columns(dict(changes))
        with self._session_factory() as session:
            row = self._first(session, user_id, *criteria)
            if row is None:
                return None
            for key, value in values.items():
                setattr(row, key, value)
            row.updated_at = now_ts()
            session.add(row)
            session.commit()
            session.refresh(row)
            record = self._to_record(row)
        self.logger.debug(
            "%s updated: %s (%s)", self.model.__name__, _key_of(record), ", ".join(sorted(values))
        )
        return record

    def _delete(self, user_id: str, *criteria) -> bool:
        with self._session_factory() as session:
            row = self._first(session, user_id, *criteria)
            if row is None:
                return False
            session.delete(row)
            session.commit()
        self.logger.debug("%s deleted for user %s", self.model.__name__, user_id)
        return True

    def _count(self, user_id: str, *criteria) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.user_id == user_id, *criteria)
        )
        with self._session_factory() as session:
            return int(session.exec(stmt).one() or 0)

    def _search(self, user_id: str, query: str, columns: Iterable[Any], limit: int) -> List[Any]:
        needle = (query or "").strip()
        if not needle or limit <= 0:
            return []
        pattern = f"%{escape_like(needle)}%"
        matches = or_(*[column.ilike(pattern, escape="\\") for column in columns])
        return self._list(
            user_id,
            matches,
            order_by=(self.model.updated_at.desc(),),
            limit=limit,
        )


def _key_of(record: Any) -> Any:
    return getattr(record, "id", None) or getattr(record, "user_id", None)


__all__ = ["BaseRepository", "escape_like"]
