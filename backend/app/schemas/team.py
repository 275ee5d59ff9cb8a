from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from sqlmodel import SQLModel

from app.schemas.common import NonEmptyName

CapacityLevel = Literal["green", "orange", "red"]


class TeamMemberCreate(SQLModel):
    name: NonEmptyName


class TeamMemberRead(SQLModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


class TeamMemberWorkload(TeamMemberRead):
    task_count: int
    capacity_level: CapacityLevel
    capacity_percentage: int
