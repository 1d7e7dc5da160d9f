# tests/test_api.py

from __future__ import annotations

from task_list import __version__

from .helpers import find_task


def _titles(section):
    return [t["title"] for t in section["tasks"]]


def test_health(client) -> None:
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "version": __version__, "tasks": 3}


def test_list_tasks_renders_sections(client) -> None:
    body = client.get("/api/tasks").json()
    assert body["title"] == "Lista de Tareas"
    assert body["total"] == 3

    pending, completed = body["sections"]
    assert pending["title"] == "Pendientes"
    assert completed["title"] == "Completadas"
    assert _titles(pending) == ["Comprar alimentos", "Leer un libro"]
    assert _titles(completed) == ["Llamar a mamá"]

    groceries = pending["tasks"][0]
    assert groceries["priority"] == "high"
    assert groceries["priority_label"] == "Prioridad: HIGH"
    assert groceries["priority_color"] == "#FF0000"
    assert groceries["toggle_action"] == "Marcar como completada"
    assert completed["tasks"][0]["toggle_action"] == "Marcar como pendiente"


def test_get_task(client, manager) -> None:
    book = find_task(manager, "Leer un libro")
    resp = client.get(f"/api/tasks/{book.id}")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Leer un libro"


def test_toggle_moves_task_between_sections(client, manager) -> None:
    book = find_task(manager, "Leer un libro")
    resp = client.patch(f"/api/tasks/{book.id}/toggle")
    assert resp.status_code == 200
    assert resp.json()["is_completed"] is True

    pending, completed = client.get("/api/tasks").json()["sections"]
    assert _titles(pending) == ["Comprar alimentos"]
    assert _titles(completed) == ["Llamar a mamá", "Leer un libro"]

    client.patch(f"/api/tasks/{book.id}/toggle")
    pending, _ = client.get("/api/tasks").json()["sections"]
    assert _titles(pending) == ["Comprar alimentos", "Leer un libro"]


def test_change_priority(client, manager) -> None:
    groceries = find_task(manager, "Comprar alimentos")
    resp = client.put(f"/api/tasks/{groceries.id}/priority", json={"priority": "low"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["priority"] == "low"
    assert body["priority_color"] == "#00FF00"
    assert body["is_completed"] is False
    assert manager.get(groceries.id).priority.value == "low"


def test_change_priority_rejects_unknown_value(client, manager) -> None:
    groceries = find_task(manager, "Comprar alimentos")
    resp = client.put(f"/api/tasks/{groceries.id}/priority", json={"priority": "urgent"})
    assert resp.status_code == 422


def test_unknown_task_returns_404(client) -> None:
    assert client.get("/api/tasks/missing").status_code == 404
    assert client.patch("/api/tasks/missing/toggle").status_code == 404
    resp = client.put("/api/tasks/missing/priority", json={"priority": "high"})
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Task not found"}


def test_priority_dialog(client) -> None:
    body = client.get("/api/priorities").json()
    assert body["title"] == "Cambiar prioridad"
    assert body["close_label"] == "Cerrar"
    assert [(o["name"], o["value"], o["color"]) for o in body["options"]] == [
        ("HIGH", "high", "red"),
        ("MEDIUM", "medium", "yellow"),
        ("LOW", "low", "green"),
    ]


def test_stats(client, manager) -> None:
    assert client.get("/api/stats").json() == {
        "total": 3,
        "completed": 1,
        "pending": 2,
        "high_priority": 1,
    }
    groceries = find_task(manager, "Comprar alimentos")
    client.patch(f"/api/tasks/{groceries.id}/toggle")
    assert client.get("/api/stats").json()["high_priority"] == 0
