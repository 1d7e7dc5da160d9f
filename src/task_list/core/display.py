"""Display metadata for tasks, kept apart from the domain models."""

from __future__ import annotations

from typing import NamedTuple

from task_list.core.models import Priority, Task


class PriorityColor(NamedTuple):
    name: str
    hex: str


PRIORITY_COLORS: dict[Priority, PriorityColor] = {
    Priority.HIGH: PriorityColor("red", "#FF0000"),
    Priority.MEDIUM: PriorityColor("yellow", "#FFFF00"),
    Priority.LOW: PriorityColor("green", "#00FF00"),
}

APP_TITLE = "Lista de Tareas"
PENDING_SECTION = "Pendientes"
COMPLETED_SECTION = "Completadas"
MARK_COMPLETED = "Marcar como completada"
MARK_PENDING = "Marcar como pendiente"
CHANGE_PRIORITY = "Cambiar prioridad"
CLOSE = "Cerrar"


def priority_label(priority: Priority) -> str:
    return f"Prioridad: {priority.name}"


def toggle_action_label(task: Task) -> str:
    """Menu text for the completion toggle, depending on current state."""
    return MARK_PENDING if task.is_completed else MARK_COMPLETED
