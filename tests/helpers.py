# tests/helpers.py

from __future__ import annotations

from task_list.core.manager import TaskListManager
from task_list.core.models import Task


def find_task(manager: TaskListManager, title: str) -> Task:
    return next(t for t in manager.tasks if t.title == title)
