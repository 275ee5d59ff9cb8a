from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import field_validator
from sqlmodel import SQLModel

from app.schemas.common import NonEmptyName


def _blank_to_none(value: Any) -> Any:
    # Clients send "" for "unassigned" from select inputs.
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TaskCreate(SQLModel):
    name: NonEmptyName
    assigned_to: UUID | None = None
    # Optional echo of the path project; must match it when present.
    project_id: UUID | None = None

    @field_validator("assigned_to", mode="before")
    @classmethod
    def normalize_assigned_to(cls, value: Any) -> Any:
        return _blank_to_none(value)


class TaskUpdate(SQLModel):
    name: NonEmptyName | None = None
    is_complete: bool | None = None
    assigned_to: UUID | None = None

    @field_validator("assigned_to", mode="before")
    @classmethod
    def normalize_assigned_to(cls, value: Any) -> Any:
        return _blank_to_none(value)


class TaskAssignee(SQLModel):
    id: UUID
    name: str


class TaskRead(SQLModel):
    id: UUID
    name: str
    is_complete: bool
    project_id: UUID
    assigned_to: UUID | None = None
    assignee: TaskAssignee | None = None
    created_at: datetime
    updated_at: datetime
