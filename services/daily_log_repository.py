"""Daily journal rows, addressed by ``(user_id, log_date)`` rather than id."""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, update
from sqlmodel import select

from core.settings import REPOSITORY
from models.daily_log import DailyLog
from models.records import DailyLogCreate, DailyLogRecord, DailyLogUpdate
from services.base_repository import BaseRepository
from utils.datetime_utils import days_ago, now_ts


class DailyLogRepository(BaseRepository):
    model = DailyLog
    log_name = "daily_log"

    def _to_record(self, row: DailyLog) -> DailyLogRecord:
        return DailyLogRecord(
            id=row.id,
            user_id=row.user_id,
            log_date=row.log_date,
            mood=row.mood or None,
            sleep_hours=row.sleep_hours,
            morning_routine=bool(row.morning_routine),
            evening_routine=bool(row.evening_routine),
            notes=row.notes or None,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def get_by_user_id(self, user_id: str, limit: int = REPOSITORY.daily_log_list_limit) -> List[DailyLogRecord]:
        return self._list(user_id, order_by=(DailyLog.log_date.desc(),), limit=limit)

    def get_by_date(self, user_id: str, log_date: int) -> Optional[DailyLogRecord]:
        return self._get(user_id, DailyLog.log_date == log_date)

    def get_last_n_days(
        self,
        user_id: str,
        days: int = REPOSITORY.last_days_default,
        *,
        now: Optional[int] = None,
    ) -> List[DailyLogRecord]:
        """Every log dated within the last ``days`` days, newest first."""

        since = days_ago(days, now=now)
        return self._list(
            user_id,
            DailyLog.log_date >= since,
            order_by=(DailyLog.log_date.desc(),),
        )

    def create(self, data: DailyLogCreate) -> DailyLogRecord:
        log = DailyLog(
            user_id=data.user_id,
            log_date=data.log_date,
            mood=data.mood,
            sleep_hours=data.sleep_hours,
            morning_routine=data.morning_routine,
            evening_routine=data.evening_routine,
            notes=data.notes,
        )
        return self._insert(log)

    def _key(self, user_id: str, log_date: int):
        return (DailyLog.user_id == user_id, DailyLog.log_date == log_date)

    def update(self, user_id: str, log_date: int, changes: DailyLogUpdate) -> Optional[DailyLogRecord]:
        """Apply ``changes`` to every row logged for that day."""

        values = changes.changes()
        stmt = update(DailyLog).where(*self._key(user_id, log_date)).values(**values, updated_at=now_ts())
        with self._session_factory() as session:
            if not session.exec(stmt).rowcount:
                return None
            session.commit()
            row = session.exec(
                select(DailyLog)
                .where(*self._key(user_id, log_date))
                .order_by(DailyLog.created_at.asc(), DailyLog.id)
                .limit(1)
            ).first()
            record = self._to_record(row)
        self.logger.debug("DailyLog updated for %s on %s (%s)", user_id, log_date, ", ".join(sorted(values)))
        return record

    def delete(self, user_id: str, log_date: int) -> bool:
        stmt = delete(DailyLog).where(*self._key(user_id, log_date))
        with self._session_factory() as session:
            removed = session.exec(stmt).rowcount
            session.commit()
        if removed:
            self.logger.debug("DailyLog deleted for %s on %s (%s rows)", user_id, log_date, removed)
        return removed > 0

    def search_by_user_id(self, user_id: str, query: str, limit: int) -> List[DailyLogRecord]:
        return self._search(user_id, query, (DailyLog.notes, DailyLog.mood), limit)


__all__ = ["DailyLogRepository"]
