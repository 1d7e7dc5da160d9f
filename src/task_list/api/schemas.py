"""Pydantic request/response schemas for Task List API."""

from __future__ import annotations

from pydantic import BaseModel

from task_list.core.display import (
    PRIORITY_COLORS,
    priority_label,
    toggle_action_label,
)
from task_list.core.models import Priority, Task


class SetPriorityRequest(BaseModel):
    priority: Priority


class TaskResponse(BaseModel):
    id: str
    title: str
    is_completed: bool
    priority: Priority
    priority_label: str
    priority_color: str
    toggle_action: str

    @classmethod
    def from_task(cls, task: Task) -> TaskResponse:
        return cls(
            id=task.id,
            title=task.title,
            is_completed=task.is_completed,
            priority=task.priority,
            priority_label=priority_label(task.priority),
            priority_color=PRIORITY_COLORS[task.priority].hex,
            toggle_action=toggle_action_label(task),
        )


class TaskSectionResponse(BaseModel):
    title: str
    tasks: list[TaskResponse]


class TaskBoardResponse(BaseModel):
    title: str
    sections: list[TaskSectionResponse]
    total: int


class PriorityOptionResponse(BaseModel):
    name: str
    value: Priority
    color: str
    hex: str


class PriorityDialogResponse(BaseModel):
    title: str
    options: list[PriorityOptionResponse]
    close_label: str


class TaskStatsResponse(BaseModel):
    total: int
    completed: int
    pending: int
    high_priority: int


class HealthResponse(BaseModel):
    status: str
    version: str
    tasks: int
