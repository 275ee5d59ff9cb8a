from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints
from sqlmodel import SQLModel

# Names are trimmed and must not be empty afterwards.
NonEmptyName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class OkResponse(SQLModel):
    ok: bool = True
    message: str | None = None
