"""Task CRUD endpoints.

Route functions are plain ``def`` so FastAPI runs them on its thread pool;
waiting on the store lock never blocks the event loop.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from task_manager.dependencies import get_raw_body, get_store
from task_manager.models import Task, TaskCreate, TaskUpdate
from task_manager.store import TaskStore

router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
    responses={
        400: {"description": "Malformed or invalid request"},
        404: {"description": "Task not found"},
    },
)


@router.get("", response_model=list[Task])
def list_tasks(store: TaskStore = Depends(get_store)) -> list[Task]:
    """List all tasks."""
    return store.list_all()


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(data: TaskCreate, store: TaskStore = Depends(get_store)) -> Task:
    """Create a new task."""
    return store.create(data)


@router.api_route(
    "/",
    methods=["GET", "POST", "PATCH", "DELETE"],
    include_in_schema=False,
)
def missing_task_id() -> None:
    """Reject item routes called without an ID."""
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Task ID required",
    )


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: str, store: TaskStore = Depends(get_store)) -> Task:
    """Get a specific task by ID."""
    return store.get(task_id)


@router.patch("/{task_id}", response_model=Task)
def update_task(
    task_id: str,
    body: bytes = Depends(get_raw_body),
    store: TaskStore = Depends(get_store),
) -> Task:
    """Update an existing task.

    The task must exist before the body is looked at, so a missing ID is a
    404 whatever the payload. Only non-empty fields in the body overwrite
    stored values.
    """
    store.get(task_id)
    try:
        data = TaskUpdate.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
    return store.update(task_id, data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, store: TaskStore = Depends(get_store)) -> None:
    """Delete a task."""
    store.delete(task_id)
