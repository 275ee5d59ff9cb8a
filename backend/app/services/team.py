from __future__ import annotations

from sqlmodel import Session, col

from app.core.logging import get_logger
from app.db import crud
from app.models.tasks import Task
from app.models.team import TeamMember
from app.schemas.team import TeamMemberWorkload
from app.services.capacity import assigned_task_counts, classify_capacity

logger = get_logger(__name__)


def list_team_workload(session: Session) -> list[TeamMemberWorkload]:
    members = crud.find(
        session,
        TeamMember,
        order_by=(col(TeamMember.created_at).asc(), col(TeamMember.id)),
    )
    counts = assigned_task_counts(session)
    workload: list[TeamMemberWorkload] = []
    for member in members:
        task_count = counts.get(member.id, 0)
        capacity = classify_capacity(task_count)
        workload.append(
            TeamMemberWorkload.model_validate(
                member,
                update={
                    "task_count": task_count,
                    "capacity_level": capacity.level,
                    "capacity_percentage": capacity.percentage,
                },
            )
        )
    return workload


def delete_team_member(session: Session, *, member: TeamMember) -> int:
    """Unassign the member's tasks, then delete the member. Returns the tasks unassigned."""
    member_id = member.id
    unassigned = crud.bulk_update(session, Task, {"assigned_to": member_id}, {"assigned_to": None})
    crud.delete(session, member)
    logger.info("team_member.deleted member_id=%s tasks_unassigned=%s", member_id, unassigned)
    return unassigned
