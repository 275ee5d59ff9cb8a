from __future__ import annotations

from sqlalchemy import func
from sqlmodel import Session, col, select
from sqlmodel.sql.expression import SelectOfScalar

from app.models.projects import PROJECT_STATUS_COMPLETED, PROJECT_STATUS_IN_PROGRESS, Project
from app.models.tasks import Task
from app.models.team import TeamMember
from app.schemas.view_models import DashboardSummary
from app.services.capacity import assigned_task_counts


def _count(session: Session, statement: SelectOfScalar[int]) -> int:
    return int(session.exec(statement).one())


def build_dashboard_summary(session: Session) -> DashboardSummary:
    """Aggregate project, task, and member counts for the overview screen."""
    active_projects = _count(
        session,
        select(func.count(col(Project.id))).where(
            col(Project.status) == PROJECT_STATUS_IN_PROGRESS
        ),
    )
    completed_projects = _count(
        session,
        select(func.count(col(Project.id))).where(
            col(Project.status) == PROJECT_STATUS_COMPLETED
        ),
    )
    total_tasks = _count(session, select(func.count(col(Task.id))))
    completed_tasks = _count(
        session,
        select(func.count(col(Task.id))).where(col(Task.is_complete).is_(True)),
    )

    member_ids = list(session.exec(select(TeamMember.id)).all())
    busy = assigned_task_counts(session)
    idle_members = sum(1 for member_id in member_ids if busy.get(member_id, 0) == 0)

    return DashboardSummary(
        active_projects=active_projects,
        completed_projects=completed_projects,
        total_tasks=total_tasks,
        completed_tasks=completed_tasks,
        tasks_to_complete=max(0, total_tasks - completed_tasks),
        team_members=len(member_ids),
        idle_members=idle_members,
    )
