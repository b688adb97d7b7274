import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from taskboard.database import MemoryStore, get_store
from taskboard.dependencies import get_current_user
from taskboard.exceptions import NotFound
from taskboard.models.user import Identity
from taskboard.schemas.task import TaskOut, TaskUpdate, TaskUpdated
from taskboard.schemas.user import MessageOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[TaskOut])
def list_tasks(store: MemoryStore = Depends(get_store)):
    """Return every task as-is: no filtering, no pagination."""
    return [TaskOut.model_validate(t) for t in store.list_tasks()]


@router.put("/{task_id}", response_model=TaskUpdated, responses={404: {"model": MessageOut}})
def update_task(
    task_id: str,
    payload: Optional[TaskUpdate] = None,
    store: MemoryStore = Depends(get_store),
    user: Identity = Depends(get_current_user),
):
    payload = payload or TaskUpdate()
    task = store.update_task(task_id, payload.status, payload.remarks)
    if task is None:
        raise NotFound("Task not found")

    logger.info("Task %s updated by user %s", task_id, user.id)
    return {"message": "Task updated", "task": TaskOut.model_validate(task)}
