"""Task read models with the assignee name resolved."""

from __future__ import annotations

from uuid import UUID

from sqlmodel import Session, col, select

from app.db import crud
from app.models.tasks import Task
from app.models.team import TeamMember
from app.schemas.tasks import TaskRead


def _read(task: Task, member: TeamMember | None) -> TaskRead:
    assignee = {"id": member.id, "name": member.name} if member is not None else None
    return TaskRead.model_validate(task, update={"assignee": assignee})


def to_task_read(session: Session, task: Task) -> TaskRead:
    member = None
    if task.assigned_to is not None:
        member = crud.get_by_id(session, TeamMember, task.assigned_to)
    return _read(task, member)


def list_project_tasks(session: Session, *, project_id: UUID) -> list[TaskRead]:
    """Tasks of a project, newest first."""
    statement = (
        select(Task, TeamMember)
        .join(TeamMember, col(Task.assigned_to) == col(TeamMember.id), isouter=True)
        .where(col(Task.project_id) == project_id)
        .order_by(col(Task.created_at).desc(), col(Task.id))
    )
    return [_read(task, member) for task, member in session.exec(statement).all()]
