from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from sqlmodel import Field, SQLModel

from app.models.projects import PROJECT_STATUS_IN_PROGRESS
from app.schemas.common import NonEmptyName

ProjectStatus = Literal["In Progress", "Completed"]


class ProjectCreate(SQLModel):
    name: NonEmptyName
    status: ProjectStatus = PROJECT_STATUS_IN_PROGRESS
    progress: int = Field(default=0, ge=0, le=100)


class ProjectUpdate(SQLModel):
    name: NonEmptyName | None = None
    status: ProjectStatus | None = None
    progress: int | None = Field(default=None, ge=0, le=100)


class ProjectRead(SQLModel):
    id: UUID
    name: str
    status: ProjectStatus
    progress: int
    created_at: datetime
    updated_at: datetime
