import threading
from dataclasses import replace
from datetime import datetime, UTC
from typing import Any, Iterable, List, Optional

from fastapi import Request

from taskboard.models.task import Task
from taskboard.models.user import User

DEFAULT_USER = User(id="1", email="admin@example.com", password="admin123")


def default_tasks() -> List[Task]:
    now = datetime.now(UTC)
    return [
        Task(id="1", title="Prepare sprint board", description="Group backlog items by priority", created_at=now),
        Task(id="2", title="Review pull requests", description="Go through the open review queue", created_at=now),
        Task(id="3", title="Update deployment notes", description="Document the new release steps", created_at=now),
    ]


class MemoryStore:
    """Process-local holder for the singleton user and the task list.

    Every read and write goes through ``_lock`` so handlers running in the
    threadpool never observe a half-applied update. Reads hand back copies.
    """

    def __init__(self, user: User = DEFAULT_USER, tasks: Optional[Iterable[Task]] = None):
        tasks = list(default_tasks() if tasks is None else tasks)
        seen = set()
        for t in tasks:
            if t.id in seen:
                raise ValueError(f"duplicate task id: {t.id!r}")
            seen.add(t.id)
        self.user = user
        self._tasks = tasks
        self._lock = threading.Lock()

    def list_tasks(self) -> List[Task]:
        with self._lock:
            return [replace(t) for t in self._tasks]

    def update_task(self, task_id: str, status: Any, remarks: Any) -> Optional[Task]:
        """Overwrite status/remarks of the first task with ``task_id``.

        Returns a copy of the updated task, or None when no task matches.
        """
        with self._lock:
            task = next((t for t in self._tasks if t.id == task_id), None)
            if task is None:
                return None
            task.status = status
            task.remarks = remarks
            task.updated_at = datetime.now(UTC)
            return replace(task)


def get_store(request: Request) -> MemoryStore:
    return request.app.state.store
