# ruff: noqa

from uuid import uuid4


def _member(client, name: str) -> dict:
    resp = client.post("/api/team", json={"name": name})
    assert resp.status_code == 201, resp.text
    return resp.json()


def _assign(client, project_id: str, member_id: str, count: int) -> list[dict]:
    return [
        client.post(
            f"/api/projects/{project_id}/tasks",
            json={"name": f"t{i}", "assigned_to": member_id},
        ).json()
        for i in range(count)
    ]


def test_create_team_member(client):
    member = _member(client, "  Alice ")

    assert member["name"] == "Alice"
    assert member["id"]


def test_create_team_member_requires_name(client):
    assert client.post("/api/team", json={}).status_code == 400
    assert client.post("/api/team", json={"name": ""}).status_code == 400


def test_list_team_reports_workload(client):
    project = client.post("/api/projects", json={"name": "Launch"}).json()
    idle = _member(client, "Idle")
    busy = _member(client, "Busy")
    swamped = _member(client, "Swamped")
    _assign(client, project["id"], busy["id"], 4)
    _assign(client, project["id"], swamped["id"], 15)

    team = {m["name"]: m for m in client.get("/api/team").json()}

    assert (team["Idle"]["task_count"], team["Idle"]["capacity_level"], team["Idle"]["capacity_percentage"]) == (0, "green", 0)
    assert (team["Busy"]["task_count"], team["Busy"]["capacity_level"], team["Busy"]["capacity_percentage"]) == (4, "orange", 40)
    assert (team["Swamped"]["task_count"], team["Swamped"]["capacity_level"], team["Swamped"]["capacity_percentage"]) == (15, "red", 100)
    assert team["Idle"]["id"] == idle["id"]


def test_delete_team_member_unassigns_tasks(client):
    project = client.post("/api/projects", json={"name": "Launch"}).json()
    alice = _member(client, "Alice")
    bob = _member(client, "Bob")
    alice_tasks = _assign(client, project["id"], alice["id"], 2)
    bob_tasks = _assign(client, project["id"], bob["id"], 1)

    resp = client.delete(f"/api/team/{alice['id']}")

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "message": "Team member deleted"}
    tasks = {t["id"]: t for t in client.get(f"/api/projects/{project['id']}/tasks").json()}
    assert len(tasks) == 3
    for task in alice_tasks:
        assert tasks[task["id"]]["assigned_to"] is None
    assert tasks[bob_tasks[0]["id"]]["assigned_to"] == bob["id"]
    assert [m["name"] for m in client.get("/api/team").json()] == ["Bob"]


def test_delete_missing_team_member_is_404(client):
    resp = client.delete(f"/api/team/{uuid4()}")

    assert resp.status_code == 404
    assert resp.json() == {"detail": "Team member not found"}
