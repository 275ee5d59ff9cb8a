"""Project CRUD plus the project-scoped task endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlmodel import Session, col

from app.api.deps import get_project_or_404, get_project_task_or_404
from app.core.errors import InvalidPayloadError
from app.db import crud
from app.db.session import get_session
from app.models.projects import Project
from app.models.tasks import Task
from app.schemas.common import OkResponse
from app.schemas.projects import ProjectCreate, ProjectRead, ProjectUpdate
from app.schemas.tasks import TaskCreate, TaskRead, TaskUpdate
from app.services.projects import delete_project as delete_project_service
from app.services.task_lifecycle import create_task, delete_task, update_task
from app.services.tasks import list_project_tasks, to_task_read

router = APIRouter(prefix="/projects", tags=["projects"])
SESSION_DEP = Depends(get_session)
PROJECT_DEP = Depends(get_project_or_404)


def _apply_project_update(session: Session, project: Project, payload: ProjectUpdate) -> Project:
    # Manual edits may set status/progress independently of the task set;
    # the next task mutation recomputes them.
    updates = payload.model_dump(exclude_unset=True)
    for key, value in updates.items():
        if value is None:
            raise InvalidPayloadError(f"{key} cannot be null")
    return crud.update(session, project, **updates)


@router.get("", response_model=list[ProjectRead])
def list_projects(session: Session = SESSION_DEP) -> list[Project]:
    return crud.find(session, Project, order_by=(col(Project.created_at).desc(), col(Project.id)))


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(payload: ProjectCreate, session: Session = SESSION_DEP) -> Project:
    with crud.write_scope(session):
        project = crud.create(session, Project, **payload.model_dump())
    session.refresh(project)
    return project


@router.get("/{project_id}", response_model=ProjectRead)
def get_project(project: Project = PROJECT_DEP) -> Project:
    return project


@router.put("/{project_id}", response_model=ProjectRead)
def update_project(
    payload: ProjectUpdate,
    project: Project = PROJECT_DEP,
    session: Session = SESSION_DEP,
) -> Project:
    with crud.write_scope(session):
        _apply_project_update(session, project, payload)
    session.refresh(project)
    return project


@router.delete("/{project_id}", response_model=OkResponse)
def delete_project(project: Project = PROJECT_DEP, session: Session = SESSION_DEP) -> OkResponse:
    with crud.write_scope(session):
        delete_project_service(session, project=project)
    return OkResponse(message="Project deleted")


@router.get("/{project_id}/tasks", response_model=list[TaskRead])
def get_project_tasks(
    project: Project = PROJECT_DEP,
    session: Session = SESSION_DEP,
) -> list[TaskRead]:
    return list_project_tasks(session, project_id=project.id)


@router.post("/{project_id}/tasks", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_project_task(
    payload: TaskCreate,
    project: Project = PROJECT_DEP,
    session: Session = SESSION_DEP,
) -> TaskRead:
    with crud.write_scope(session):
        task = create_task(session, project=project, payload=payload)
    session.refresh(task)
    return to_task_read(session, task)


@router.put("/{project_id}/tasks/{task_id}", response_model=TaskRead)
def update_project_task(
    payload: TaskUpdate,
    task: Task = Depends(get_project_task_or_404),
    session: Session = SESSION_DEP,
) -> TaskRead:
    with crud.write_scope(session):
        update_task(session, task=task, payload=payload)
    session.refresh(task)
    return to_task_read(session, task)


@router.delete("/{project_id}/tasks/{task_id}", response_model=OkResponse)
def delete_project_task(
    task: Task = Depends(get_project_task_or_404),
    session: Session = SESSION_DEP,
) -> OkResponse:
    with crud.write_scope(session):
        delete_task(session, task=task)
    return OkResponse(message="Task deleted")
