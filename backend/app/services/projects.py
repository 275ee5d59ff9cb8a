from __future__ import annotations

from sqlmodel import Session

from app.core.logging import get_logger
from app.db import crud
from app.models.projects import Project
from app.models.tasks import Task

logger = get_logger(__name__)


def delete_project(session: Session, *, project: Project) -> int:
    """Delete the project's tasks, then the project. Returns the number of tasks removed.

    Both steps run in the caller's transaction.
    """
    project_id = project.id
    removed = crud.bulk_delete(session, Task, project_id=project_id)
    crud.delete(session, project)
    logger.info("project.deleted project_id=%s tasks_removed=%s", project_id, removed)
    return removed
