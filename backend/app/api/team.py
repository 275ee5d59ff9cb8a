from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.deps import get_team_member_or_404
from app.db import crud
from app.db.session import get_session
from app.models.team import TeamMember
from app.schemas.common import OkResponse
from app.schemas.team import TeamMemberCreate, TeamMemberRead, TeamMemberWorkload
from app.services.team import delete_team_member as delete_team_member_service
from app.services.team import list_team_workload

router = APIRouter(prefix="/team", tags=["team"])
SESSION_DEP = Depends(get_session)


@router.get("", response_model=list[TeamMemberWorkload])
def list_team_members(session: Session = SESSION_DEP) -> list[TeamMemberWorkload]:
    return list_team_workload(session)


@router.post("", response_model=TeamMemberRead, status_code=status.HTTP_201_CREATED)
def create_team_member(payload: TeamMemberCreate, session: Session = SESSION_DEP) -> TeamMember:
    with crud.write_scope(session):
        member = crud.create(session, TeamMember, name=payload.name)
    session.refresh(member)
    return member


@router.delete("/{member_id}", response_model=OkResponse)
def delete_team_member(
    member: TeamMember = Depends(get_team_member_or_404),
    session: Session = SESSION_DEP,
) -> OkResponse:
    with crud.write_scope(session):
        delete_team_member_service(session, member=member)
    return OkResponse(message="Team member deleted")
