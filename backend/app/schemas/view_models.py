from __future__ import annotations

from sqlmodel import SQLModel


class DashboardSummary(SQLModel):
    active_projects: int
    completed_projects: int
    total_tasks: int
    completed_tasks: int
    tasks_to_complete: int
    team_members: int
    idle_members: int
