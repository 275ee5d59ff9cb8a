from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/")
def root() -> dict[str, str]:
    return {"message": "Tracker API running"}


@router.get("/healthz")
def healthz() -> dict[str, bool]:
    return {"ok": True}
