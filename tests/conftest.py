# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from task_list.core import manager as manager_module
from task_list.core.manager import TaskListManager


@pytest.fixture()
def manager(monkeypatch: pytest.MonkeyPatch) -> TaskListManager:
    """Fresh seeded manager installed as the process-wide instance."""
    mgr = TaskListManager.with_seed()
    monkeypatch.setattr(manager_module, "_manager", mgr)
    return mgr


@pytest.fixture()
def client(manager: TaskListManager):
    from task_list.api.main import app

    with TestClient(app) as c:
        yield c
