"""In-memory task storage.

All state lives in a single ``TaskStore`` instance owned by the application.
Reads share a lock, writes hold it exclusively, and the ID counter is only
touched while the write lock is held.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta

from task_manager.exceptions import TaskNotFoundError
from task_manager.models import Task, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Waiting writers block new readers so a steady stream of reads cannot
    starve a write. The lock is not reentrant.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


def _timestamp_after(previous: datetime) -> datetime:
    """Current UTC time, nudged forward if the clock has not moved past ``previous``."""
    now = datetime.now(UTC)
    if now > previous:
        return now
    return previous + timedelta(microseconds=1)


class TaskStore:
    """Thread-safe in-memory task storage."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._tasks: dict[str, Task] = {}
        self._last_id = 0
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    def list_all(self) -> list[Task]:
        """Return a snapshot of all tasks. Order is not part of the contract."""
        with self._lock.read_locked():
            return list(self._tasks.values())

    def get(self, task_id: str) -> Task:
        """Get a task by its ID, raising TaskNotFoundError if absent."""
        with self._lock.read_locked():
            task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create(self, data: TaskCreate) -> Task:
        """Create a new task and return it."""
        with self._lock.write_locked():
            self._last_id += 1
            now = datetime.now(UTC)
            task = Task(
                id=str(self._last_id),
                title=data.title,
                description=data.description,
                status=data.status,
                priority=data.priority,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task
        logger.debug("Created task %s", task.id)
        return task

    def update(self, task_id: str, data: TaskUpdate) -> Task:
        """Apply the non-empty fields of ``data`` and refresh ``updated_at``."""
        with self._lock.write_locked():
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            update_data = data.changes()
            update_data["updated_at"] = _timestamp_after(task.updated_at)
            updated_task = task.model_copy(update=update_data)
            self._tasks[task_id] = updated_task
        logger.debug("Updated task %s (%s)", task_id, ", ".join(sorted(update_data)))
        return updated_task

    def delete(self, task_id: str) -> None:
        """Delete a task, raising TaskNotFoundError if absent."""
        with self._lock.write_locked():
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
        logger.debug("Deleted task %s", task_id)
