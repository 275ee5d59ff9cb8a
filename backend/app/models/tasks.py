from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.time import utcnow


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    is_complete: bool = Field(default=False)

    # Owning project; never changes after creation.
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    # Weak reference: cleared, not cascaded, when the member is deleted.
    assigned_to: UUID | None = Field(default=None, foreign_key="team_members.id", index=True)

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        index=True,
    )
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
