"""Boundary checks applied by callers before a repository is invoked.

The repositories trust their input; an HTTP handler (or any other caller)
runs these helpers on the request body first and turns
:class:`ValidationError` into a 400 response.
"""
from __future__ import annotations

import numbers
from typing import Any, Optional

from core.enums import PROJECT_STATUSES, TASK_DONE, TASK_PRIORITIES, TASK_STATUSES
from core.settings import SEARCH
from models.records import (
    UNSET,
    AreaCreate,
    AreaUpdate,
    DailyLogCreate,
    DailyLogUpdate,
    ProjectCreate,
    ProjectUpdate,
    TaskCreate,
    TaskUpdate,
)


class ValidationError(ValueError):
    """Request data rejected before reaching the data layer."""


def _require_text(value: Any, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")


def _check_choice(value: Any, choices, label: str) -> None:
    if value not in choices:
        allowed = ", ".join(sorted(choices))
        raise ValidationError(f"Invalid {label} {value!r}; expected one of: {allowed}")


def _check_number(value: Any, label: str, *, integer: bool = False) -> None:
    if value is None or value is UNSET:
        return
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{label} must be a number")
    if integer and not isinstance(value, numbers.Integral):
        raise ValidationError(f"{label} must be a whole number of seconds")


def _check_context(value: Any) -> None:
    if value is None or value is UNSET:
        return
    if isinstance(value, str) or not all(isinstance(tag, str) for tag in value):
        raise ValidationError("context must be a list of strings")


def validate_task_create(data: TaskCreate) -> TaskCreate:
    _require_text(data.user_id, "userId")
    _require_text(data.title, "Title")
    _check_choice(data.status, TASK_STATUSES, "status")
    _check_choice(data.priority, TASK_PRIORITIES, "priority")
    _check_number(data.due_date, "dueDate", integer=True)
    _check_number(data.do_date, "doDate", integer=True)
    _check_number(data.effort, "effort")
    _check_context(data.context)
    return data


def validate_task_update(changes: TaskUpdate) -> TaskUpdate:
    if changes.title is not UNSET:
        _require_text(changes.title, "Title")
    if changes.status is not UNSET:
        _check_choice(changes.status, TASK_STATUSES, "status")
    if changes.priority is not UNSET:
        _check_choice(changes.priority, TASK_PRIORITIES, "priority")
    _check_number(changes.due_date, "dueDate", integer=True)
    _check_number(changes.do_date, "doDate", integer=True)
    _check_number(changes.effort, "effort")
    _check_context(changes.context)
    return changes


def apply_completion_rule(changes: TaskUpdate) -> TaskUpdate:
    """Keep ``is_completed`` in step with a status change."""

    if changes.status is not UNSET:
        changes.is_completed = changes.status == TASK_DONE
    return changes


def validate_project_create(data: ProjectCreate) -> ProjectCreate:
    _require_text(data.user_id, "userId")
    _require_text(data.name, "Name")
    _check_choice(data.status, PROJECT_STATUSES, "status")
    _check_number(data.start_date, "startDate", integer=True)
    _check_number(data.end_date, "endDate", integer=True)
    return data


def validate_project_update(changes: ProjectUpdate) -> ProjectUpdate:
    if changes.name is not UNSET:
        _require_text(changes.name, "Name")
    if changes.status is not UNSET:
        _check_choice(changes.status, PROJECT_STATUSES, "status")
    _check_number(changes.start_date, "startDate", integer=True)
    _check_number(changes.end_date, "endDate", integer=True)
    return changes


def validate_area_create(data: AreaCreate) -> AreaCreate:
    _require_text(data.user_id, "userId")
    _require_text(data.name, "Name")
    return data


def validate_area_update(changes: AreaUpdate) -> AreaUpdate:
    if changes.name is not UNSET:
        _require_text(changes.name, "Name")
    return changes


def validate_daily_log_create(data: DailyLogCreate) -> DailyLogCreate:
    _require_text(data.user_id, "userId")
    if not data.log_date:
        raise ValidationError("Log date is required")
    _check_number(data.log_date, "logDate", integer=True)
    _check_number(data.sleep_hours, "sleepHours")
    return data


def validate_daily_log_update(changes: DailyLogUpdate) -> DailyLogUpdate:
    _check_number(changes.sleep_hours, "sleepHours")
    return changes


def validate_search_request(query: Any, limit: Optional[Any] = None) -> tuple:
    """Return ``(query, limit)`` with ``limit`` coerced to ``int`` when given."""

    if not isinstance(query, str) or len(query) < 1:
        raise ValidationError("Search query is required")
    if limit is None or limit == "":
        return query, None
    try:
        value = int(limit)
    except (TypeError, ValueError):
        raise ValidationError("limit must be an integer") from None
    if value < 1 or value > SEARCH.max_limit:
        raise ValidationError(f"limit must be between 1 and {SEARCH.max_limit}")
    return query, value


__all__ = [
    "ValidationError",
    "apply_completion_rule",
    "validate_area_create",
    "validate_area_update",
    "validate_daily_log_create",
    "validate_daily_log_update",
    "validate_project_create",
    "validate_project_update",
    "validate_search_request",
    "validate_task_create",
    "validate_task_update",
]
