"""ORM models exposed by the tasks data layer."""
from .task import Task
from .project import Project
from .area import Area
from .daily_log import DailyLog
from .tasks_settings import TasksSettings

__all__ = ["Task", "Project", "Area", "DailyLog", "TasksSettings"]
