"""Federated search across tasks, projects, areas and daily logs."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from core.settings import MODULE_ID, MODULE_NAME, SEARCH, SearchSettings
from core.log import get_logger
from models.records import AreaRecord, DailyLogRecord, ProjectRecord, TaskRecord, _Serializable
from services.area_repository import AreaRepository
from services.daily_log_repository import DailyLogRepository
from services.project_repository import ProjectRepository
from services.task_repository import TaskRepository
from utils.datetime_utils import iso_date, to_millis


ENTITY_ORDER = ("task", "project", "area", "daily_log")


@dataclass
class SearchResult(_Serializable):
    module_id: str
    module_name: str
    entity_type: str
    entity_id: str
    title: str
    href: str
    snippet: Optional[str] = None
    updated_at: Optional[int] = None  # milliseconds


@dataclass
class SearchResponse:
    query: str
    results: List[SearchResult]

    @property
    def total(self) -> int:
        return len(self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "results": [result.to_dict() for result in self.results],
            "total": self.total,
        }


def build_snippet(value: Optional[str], length: int = SEARCH.snippet_length) -> Optional[str]:
    if not value:
        return None
    trimmed = value.strip()
    if not trimmed:
        return None
    if len(trimmed) <= length:
        return trimmed
    return f"{trimmed[:length].strip()}..."


class SearchAggregator:
    def __init__(
        self,
        tasks: Optional[TaskRepository] = None,
        projects: Optional[ProjectRepository] = None,
        areas: Optional[AreaRepository] = None,
        daily_logs: Optional[DailyLogRepository] = None,
        *,
        session_factory: Optional[Callable[[], Any]] = None,
        settings: SearchSettings = SEARCH,
    ) -> None:
        self.tasks = tasks or TaskRepository(session_factory)
        self.projects = projects or ProjectRepository(session_factory)
        self.areas = areas or AreaRepository(session_factory)
        self.daily_logs = daily_logs or DailyLogRepository(session_factory)
        self.settings = settings
        self.logger = get_logger("search")

    def per_type_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.settings.per_type_limit
        return max(0, min(self.settings.per_type_limit, limit))

    def search(self, user_id: str, query: str, limit: Optional[int] = None) -> SearchResponse:
        cap = self.per_type_limit(limit)
        sources = {
            "task": self.tasks,
            "project": self.projects,
            "area": self.areas,
            "daily_log": self.daily_logs,
        }
        self.logger.debug("Search %r for user %s (per-type cap %s)", query, user_id, cap)
        with ThreadPoolExecutor(max_workers=self.settings.workers) as pool:
            futures = {
                kind: pool.submit(repo.search_by_user_id, user_id, query, cap)
                for kind, repo in sources.items()
            }
            hits: Dict[str, List[Any]] = {}
            for kind in ENTITY_ORDER:
                try:
                    hits[kind] = futures[kind].result()
                except Exception as exc:
                    self.logger.error("Search over %s failed: %s", kind, exc)
                    raise

        results: List[SearchResult] = []
        results.extend(self._from_task(task) for task in hits["task"])
        results.extend(self._from_project(project) for project in hits["project"])
        results.extend(self._from_area(area) for area in hits["area"])
        results.extend(self._from_daily_log(log) for log in hits["daily_log"])

        if self.settings.enforce_total_limit and limit is not None:
            results = results[: max(0, limit)]
        return SearchResponse(query=query, results=results)

    # ------------------------------------------------------------------
    def _result(self, entity_type: str, **values: Any) -> SearchResult:
        return SearchResult(
            module_id=MODULE_ID,
            module_name=MODULE_NAME,
            entity_type=entity_type,
            href=self.settings.hrefs[entity_type],
            **values,
        )

    def _from_task(self, task: TaskRecord) -> SearchResult:
        return self._result(
            "task",
            entity_id=task.id,
            title=task.title,
            snippet=build_snippet(task.description, self.settings.snippet_length),
            updated_at=to_millis(task.updated_at),
        )

    def _from_project(self, project: ProjectRecord) -> SearchResult:
        return self._result(
            "project",
            entity_id=project.id,
            title=project.name,
            snippet=build_snippet(project.description, self.settings.snippet_length),
            updated_at=to_millis(project.updated_at),
        )

    def _from_area(self, area: AreaRecord) -> SearchResult:
        return self._result(
            "area",
            entity_id=area.id,
            title=area.name,
            snippet=build_snippet(area.description, self.settings.snippet_length),
            updated_at=to_millis(area.updated_at),
        )

    def _from_daily_log(self, log: DailyLogRecord) -> SearchResult:
        return self._result(
            "daily_log",
            entity_id=log.id,
            title=f"Daily Log: {iso_date(log.log_date)}",
            snippet=build_snippet(log.notes or log.mood, self.settings.snippet_length),
            updated_at=to_millis(log.updated_at),
        )


__all__ = ["SearchAggregator", "SearchResponse", "SearchResult", "build_snippet"]
