"""Fixed vocabularies for task, priority and project states."""
from __future__ import annotations

# Task workflow. ``is_completed`` mirrors ``done``; callers keep the two in sync.
TASK_TO_DO = "to_do"
TASK_IN_PROGRESS = "in_progress"
TASK_WAITING = "waiting"
TASK_DONE = "done"
TASK_ARCHIVED = "archived"

TASK_STATUSES = frozenset(
    {TASK_TO_DO, TASK_IN_PROGRESS, TASK_WAITING, TASK_DONE, TASK_ARCHIVED}
)
DEFAULT_TASK_STATUS = TASK_TO_DO

PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"

TASK_PRIORITIES = frozenset({PRIORITY_HIGH, PRIORITY_MEDIUM, PRIORITY_LOW})
DEFAULT_TASK_PRIORITY = PRIORITY_MEDIUM

PROJECT_PLANNING = "planning"
PROJECT_ACTIVE = "active"
PROJECT_PAUSED = "paused"
PROJECT_DONE = "done"

PROJECT_STATUSES = frozenset(
    {PROJECT_PLANNING, PROJECT_ACTIVE, PROJECT_PAUSED, PROJECT_DONE}
)
DEFAULT_PROJECT_STATUS = PROJECT_PLANNING


__all__ = [
    "TASK_TO_DO",
    "TASK_IN_PROGRESS",
    "TASK_WAITING",
    "TASK_DONE",
    "TASK_ARCHIVED",
    "TASK_STATUSES",
    "DEFAULT_TASK_STATUS",
    "PRIORITY_HIGH",
    "PRIORITY_MEDIUM",
    "PRIORITY_LOW",
    "TASK_PRIORITIES",
    "DEFAULT_TASK_PRIORITY",
    "PROJECT_PLANNING",
    "PROJECT_ACTIVE",
    "PROJECT_PAUSED",
    "PROJECT_DONE",
    "PROJECT_STATUSES",
    "DEFAULT_PROJECT_STATUS",
]
