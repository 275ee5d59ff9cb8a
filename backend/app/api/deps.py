from __future__ import annotations

from uuid import UUID

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.db import crud
from app.db.session import get_session
from app.models.projects import Project
from app.models.tasks import Task
from app.models.team import TeamMember


def get_project_or_404(project_id: UUID, session: Session = Depends(get_session)) -> Project:
    project = crud.get_by_id(session, Project, project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


def get_task_or_404(task_id: UUID, session: Session = Depends(get_session)) -> Task:
    task = crud.get_by_id(session, Task, task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


def get_project_task_or_404(
    project: Project = Depends(get_project_or_404),
    task: Task = Depends(get_task_or_404),
) -> Task:
    if task.project_id != project.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


def get_team_member_or_404(member_id: UUID, session: Session = Depends(get_session)) -> TeamMember:
    member = crud.get_by_id(session, TeamMember, member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")
    return member
