"""Team member workload, computed on read and never stored.

The band and the percentage are independent scales: the band thresholds are
not derived from the percentage formula.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final
from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, col, select

from app.models.tasks import Task

CAPACITY_ORANGE_AT: Final[int] = 4
CAPACITY_RED_AT: Final[int] = 7
# Assigned-task count treated as 100% load.
CAPACITY_FULL_TASK_COUNT: Final[int] = 10


@dataclass(frozen=True, slots=True)
class Capacity:
    level: str
    percentage: int


def capacity_level(task_count: int) -> str:
    if task_count >= CAPACITY_RED_AT:
        return "red"
    if task_count >= CAPACITY_ORANGE_AT:
        return "orange"
    return "green"


def capacity_percentage(task_count: int) -> int:
    return min(task_count * 100 // CAPACITY_FULL_TASK_COUNT, 100)


def classify_capacity(task_count: int) -> Capacity:
    return Capacity(level=capacity_level(task_count), percentage=capacity_percentage(task_count))


def assigned_task_counts(session: Session) -> dict[UUID, int]:
    """Count tasks per assignee in one grouped query; unassigned tasks are skipped."""
    statement = (
        select(Task.assigned_to, func.count(col(Task.id)))
        .where(col(Task.assigned_to).is_not(None))
        .group_by(col(Task.assigned_to))
    )
    return {member_id: count for member_id, count in session.exec(statement).all()}
