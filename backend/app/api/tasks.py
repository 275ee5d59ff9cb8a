from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.deps import get_task_or_404
from app.db import crud
from app.db.session import get_session
from app.models.tasks import Task
from app.schemas.common import OkResponse
from app.schemas.tasks import TaskRead, TaskUpdate
from app.services.task_lifecycle import delete_task as delete_task_service
from app.services.task_lifecycle import update_task as update_task_service
from app.services.tasks import to_task_read

router = APIRouter(prefix="/tasks", tags=["tasks"])
SESSION_DEP = Depends(get_session)
TASK_DEP = Depends(get_task_or_404)


@router.get("/{task_id}", response_model=TaskRead)
def get_task(task: Task = TASK_DEP, session: Session = SESSION_DEP) -> TaskRead:
    return to_task_read(session, task)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    payload: TaskUpdate,
    task: Task = TASK_DEP,
    session: Session = SESSION_DEP,
) -> TaskRead:
    with crud.write_scope(session):
        update_task_service(session, task=task, payload=payload)
    session.refresh(task)
    return to_task_read(session, task)


@router.delete("/{task_id}", response_model=OkResponse)
def delete_task(task: Task = TASK_DEP, session: Session = SESSION_DEP) -> OkResponse:
    with crud.write_scope(session):
        delete_task_service(session, task=task)
    return OkResponse(message="Task deleted")
