# ruff: noqa

from datetime import datetime

from app.core.time import utcnow
from app.db import crud
from app.models.projects import Project
from app.models.tasks import Task
from app.services.tasks import list_project_tasks


def test_utcnow_is_timezone_aware():
    assert utcnow().utcoffset() is not None
    assert utcnow().utcoffset().total_seconds() == 0


def test_timestamps_round_trip_through_create_and_update(session):
    with crud.write_scope(session):
        project = crud.create(session, Project, name="Launch")
    project_id = project.id
    session.expunge_all()

    stored = crud.get_by_id(session, Project, project_id)
    assert isinstance(stored.created_at, datetime)
    created = stored.created_at.replace(tzinfo=None)

    with crud.write_scope(session):
        crud.update(session, stored, name="Relaunch")
    session.expunge_all()

    reloaded = crud.get_by_id(session, Project, project_id)
    assert reloaded.name == "Relaunch"
    assert reloaded.updated_at.replace(tzinfo=None) >= created


def test_api_write_succeeds(client):
    resp = client.post("/api/projects", json={"name": "Launch"})

    assert resp.status_code == 201, resp.text
    assert client.put(f"/api/projects/{resp.json()['id']}", json={"progress": 10}).status_code == 200


def test_tasks_with_equal_timestamps_have_stable_order(session):
    with crud.write_scope(session):
        project = crud.create(session, Project, name="Launch")
        stamp = utcnow()
        for i in range(4):
            crud.create(session, Task, name=f"t{i}", project_id=project.id, created_at=stamp)

    first = [t.id for t in list_project_tasks(session, project_id=project.id)]
    second = [t.id for t in list_project_tasks(session, project_id=project.id)]

    assert first == second == sorted(first)
