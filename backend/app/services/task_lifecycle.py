"""Task create/update/delete and the project/member invariants around them.

Every mutation is followed by a progress recalculation of the owning
project inside the same session, so a single commit by the caller persists
the task change together with the derived project fields.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlmodel import Session

from app.core.errors import InvalidPayloadError
from app.core.logging import get_logger
from app.db import crud
from app.models.projects import Project
from app.models.tasks import Task
from app.models.team import TeamMember
from app.schemas.tasks import TaskCreate, TaskUpdate
from app.services.progress import recalculate_project_progress

logger = get_logger(__name__)

_NON_NULLABLE_FIELDS = ("name", "is_complete")


def _require_member(session: Session, member_id: UUID | None) -> None:
    if member_id is None:
        return
    if crud.get_by_id(session, TeamMember, member_id) is None:
        raise InvalidPayloadError("assigned_to does not reference a team member")


def create_task(session: Session, *, project: Project, payload: TaskCreate) -> Task:
    if payload.project_id is not None and payload.project_id != project.id:
        raise InvalidPayloadError("project_id does not match the project in the path")
    _require_member(session, payload.assigned_to)

    task = crud.create(
        session,
        Task,
        name=payload.name,
        project_id=project.id,
        assigned_to=payload.assigned_to,
    )
    recalculate_project_progress(session, project.id)
    logger.info(
        "task.created task_id=%s project_id=%s assigned_to=%s",
        task.id,
        project.id,
        task.assigned_to,
    )
    return task


def _resolve_updates(session: Session, task: Task, payload: TaskUpdate) -> dict[str, Any]:
    updates = payload.model_dump(exclude_unset=True)
    for field in _NON_NULLABLE_FIELDS:
        if field in updates and updates[field] is None:
            raise InvalidPayloadError(f"{field} cannot be null")

    completing = updates.get("is_complete") is True and not task.is_complete
    if completing:
        # Completion always releases the assignee, whatever else the request says.
        updates["assigned_to"] = None
        return updates

    will_be_complete = updates.get("is_complete", task.is_complete)
    new_assignee = updates.get("assigned_to")
    if new_assignee is not None:
        if will_be_complete:
            raise InvalidPayloadError("Completed tasks cannot be assigned")
        _require_member(session, new_assignee)
    return updates


def update_task(session: Session, *, task: Task, payload: TaskUpdate) -> Task:
    """Apply a partial update; fields absent from the payload are left unchanged."""
    updates = _resolve_updates(session, task, payload)
    crud.update(session, task, **updates)
    recalculate_project_progress(session, task.project_id)
    logger.info("task.updated task_id=%s fields=%s", task.id, sorted(updates))
    return task


def delete_task(session: Session, *, task: Task) -> None:
    project_id = task.project_id
    task_id = task.id
    crud.delete(session, task)
    recalculate_project_progress(session, project_id)
    logger.info("task.deleted task_id=%s project_id=%s", task_id, project_id)
