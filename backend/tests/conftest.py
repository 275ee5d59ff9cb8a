# ruff: noqa

import os

# Settings are read at import time; keep tests off the on-disk database and auth.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["LOCAL_AUTH_TOKEN"] = ""
os.environ["DERIVE_PROJECT_STATUS"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.models
from app.core.config import settings
from app.db.session import get_session
from app.main import create_app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    app = create_app()

    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    with TestClient(app) as client:
        yield client


@pytest.fixture
def status_derivation_off(monkeypatch):
    monkeypatch.setattr(settings, "derive_project_status", False)
