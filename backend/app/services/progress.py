"""Project progress derived from the project's task set.

Recalculation is a read-then-write with no version check: it re-reads every
task of the project and unconditionally rewrites ``progress`` (and, when
``settings.derive_project_status`` is on, ``status``). Two concurrent
mutations of the same project can therefore race, and the last write wins.
"""

from __future__ import annotations

from uuid import UUID

from sqlmodel import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.db import crud
from app.models.projects import PROJECT_STATUS_COMPLETED, PROJECT_STATUS_IN_PROGRESS, Project
from app.models.tasks import Task

logger = get_logger(__name__)


def compute_progress(total: int, completed: int) -> int:
    """Return ``round(100 * completed / total)`` with halves rounded up; 0 for no tasks."""
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def derive_status(progress: int) -> str:
    return PROJECT_STATUS_COMPLETED if progress == 100 else PROJECT_STATUS_IN_PROGRESS


def recalculate_project_progress(session: Session, project_id: UUID) -> Project | None:
    """Rewrite the derived fields of a project from its current tasks.

    Returns the project, or ``None`` when it no longer exists (a no-op, not an error).
    The write is flushed, not committed; callers own the transaction.
    """
    project = crud.get_by_id(session, Project, project_id)
    if project is None:
        logger.debug("progress.recalculate.skipped project_id=%s reason=missing", project_id)
        return None

    tasks = crud.find(session, Task, project_id=project_id)
    completed = sum(1 for task in tasks if task.is_complete)
    progress = compute_progress(len(tasks), completed)

    values: dict[str, object] = {"progress": progress}
    if settings.derive_project_status:
        values["status"] = derive_status(progress)

    crud.update(session, project, **values)
    logger.debug(
        "progress.recalculated project_id=%s total=%s completed=%s progress=%s status=%s",
        project_id,
        len(tasks),
        completed,
        progress,
        project.status,
    )
    return project
