"""Domain models for Task List."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from uuid import uuid4


class Priority(str, Enum):
    """Priority level for a task."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Task:
    """A task. Updates produce a new value instead of mutating this one."""

    title: str
    is_completed: bool = False
    priority: Priority = Priority.MEDIUM
    # Equality is by value; the id only keys manager updates.
    id: str = field(default_factory=lambda: str(uuid4()), compare=False)


def toggle_completion(task: Task) -> Task:
    return replace(task, is_completed=not task.is_completed)


def set_priority(task: Task, priority: Priority) -> Task:
    return replace(task, priority=priority)
