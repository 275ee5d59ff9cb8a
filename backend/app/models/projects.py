from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.time import utcnow

PROJECT_STATUS_IN_PROGRESS = "In Progress"
PROJECT_STATUS_COMPLETED = "Completed"


class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    status: str = Field(default=PROJECT_STATUS_IN_PROGRESS)

    # Derived from the task set on every task mutation; manual edits are allowed.
    progress: int = Field(default=0)

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        index=True,
    )
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
