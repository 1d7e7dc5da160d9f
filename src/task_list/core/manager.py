"""Task List Manager: owns the in-memory task list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import structlog

from task_list.config import get_settings
from task_list.core.models import Priority, Task, set_priority, toggle_completion

logger = structlog.get_logger()

Listener = Callable[[tuple[Task, ...]], None]

SEED_TASKS: tuple[tuple[str, bool, Priority], ...] = (
    ("Comprar alimentos", False, Priority.HIGH),
    ("Llamar a mamá", True, Priority.MEDIUM),
    ("Leer un libro", False, Priority.LOW),
)


class TaskNotFoundError(LookupError):
    """No task with the given id exists."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


def partition(tasks: Iterable[Task]) -> tuple[list[Task], list[Task]]:
    """Split tasks into (pending, completed), keeping their relative order."""
    pending: list[Task] = []
    completed: list[Task] = []
    for task in tasks:
        (completed if task.is_completed else pending).append(task)
    return pending, completed


def replace(tasks: Sequence[Task], old_task: Task, new_task: Task) -> list[Task]:
    """Return a copy of ``tasks`` with the first value-equal ``old_task`` swapped.

    A miss returns an unchanged copy.
    """
    result = list(tasks)
    for index, task in enumerate(result):
        if task == old_task:
            result[index] = new_task
            break
    return result


class TaskListManager:
    """Holds the authoritative ordered task list.

    The presentation layer reads snapshots through ``tasks`` and requests
    mutations through the id-keyed methods. Listeners registered with
    ``subscribe`` receive the new snapshot after every change.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])
        self._listeners: list[Listener] = []
        logger.info("task_list_created", tasks=len(self._tasks))

    @classmethod
    def with_seed(cls) -> TaskListManager:
        return cls(
            Task(title=title, is_completed=done, priority=priority)
            for title, done, priority in SEED_TASKS
        )

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def partition(self) -> tuple[list[Task], list[Task]]:
        return partition(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    def replace(self, old_task: Task, new_task: Task) -> bool:
        if old_task not in self._tasks:
            logger.debug("task_replace_missed", task_id=old_task.id)
            return False
        self._set(replace(self._tasks, old_task, new_task))
        return True

    def toggle_completion(self, task_id: str) -> Task:
        index = self._index_of(task_id)
        task = toggle_completion(self._tasks[index])
        self._store(index, task)
        logger.info("task_toggled", task_id=task_id, is_completed=task.is_completed)
        return task

    def set_priority(self, task_id: str, priority: Priority) -> Task:
        index = self._index_of(task_id)
        task = set_priority(self._tasks[index], priority)
        self._store(index, task)
        logger.info("task_priority_changed", task_id=task_id, priority=priority.value)
        return task

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def stats(self) -> dict:
        pending, completed = self.partition()
        return {
            "total": len(self._tasks),
            "completed": len(completed),
            "pending": len(pending),
            "high_priority": sum(1 for t in pending if t.priority is Priority.HIGH),
        }

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        logger.warning("task_not_found", task_id=task_id)
        raise TaskNotFoundError(task_id)

    def _store(self, index: int, task: Task) -> None:
        updated = list(self._tasks)
        updated[index] = task
        self._set(updated)

    def _set(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        snapshot = self.tasks
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("task_listener_failed")


_manager: TaskListManager | None = None


def get_manager() -> TaskListManager:
    global _manager
    if _manager is None:
        if get_settings().seed_tasks:
            _manager = TaskListManager.with_seed()
        else:
            _manager = TaskListManager()
    return _manager
