"""FastAPI application for Task List."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from task_list import __version__
from task_list.api.schemas import (
    HealthResponse,
    PriorityDialogResponse,
    PriorityOptionResponse,
    SetPriorityRequest,
    TaskBoardResponse,
    TaskResponse,
    TaskSectionResponse,
    TaskStatsResponse,
)
from task_list.config import configure_logging, get_settings
from task_list.core import display
from task_list.core.manager import TaskNotFoundError, get_manager
from task_list.core.models import Priority

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings())
    manager = get_manager()
    logger.info("task_list_ready", tasks=len(manager.tasks))
    yield


app = FastAPI(
    title="Task List API",
    description="Pending and completed tasks with priorities",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Task not found")


@app.get("/api/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok", version=__version__, tasks=len(get_manager().tasks)
    )


@app.get("/api/tasks", response_model=TaskBoardResponse)
async def list_tasks() -> TaskBoardResponse:
    manager = get_manager()
    pending, completed = manager.partition()
    return TaskBoardResponse(
        title=display.APP_TITLE,
        sections=[
            TaskSectionResponse(
                title=display.PENDING_SECTION,
                tasks=[TaskResponse.from_task(t) for t in pending],
            ),
            TaskSectionResponse(
                title=display.COMPLETED_SECTION,
                tasks=[TaskResponse.from_task(t) for t in completed],
            ),
        ],
        total=len(manager.tasks),
    )


@app.get("/api/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str) -> TaskResponse:
    try:
        task = get_manager().get(task_id)
    except TaskNotFoundError:
        raise _not_found()
    return TaskResponse.from_task(task)


@app.patch("/api/tasks/{task_id}/toggle", response_model=TaskResponse)
async def toggle_task(task_id: str) -> TaskResponse:
    try:
        task = get_manager().toggle_completion(task_id)
    except TaskNotFoundError:
        raise _not_found()
    return TaskResponse.from_task(task)


@app.put("/api/tasks/{task_id}/priority", response_model=TaskResponse)
async def change_priority(task_id: str, body: SetPriorityRequest) -> TaskResponse:
    try:
        task = get_manager().set_priority(task_id, body.priority)
    except TaskNotFoundError:
        raise _not_found()
    return TaskResponse.from_task(task)


@app.get("/api/priorities", response_model=PriorityDialogResponse)
async def list_priorities() -> PriorityDialogResponse:
    return PriorityDialogResponse(
        title=display.CHANGE_PRIORITY,
        options=[
            PriorityOptionResponse(
                name=priority.name,
                value=priority,
                color=display.PRIORITY_COLORS[priority].name,
                hex=display.PRIORITY_COLORS[priority].hex,
            )
            for priority in Priority
        ],
        close_label=display.CLOSE,
    )


@app.get("/api/stats", response_model=TaskStatsResponse)
async def get_stats() -> TaskStatsResponse:
    return TaskStatsResponse(**get_manager().stats())
