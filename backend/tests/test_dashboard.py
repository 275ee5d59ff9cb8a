# ruff: noqa


def test_dashboard_summary_empty(client):
    assert client.get("/api/dashboard/summary").json() == {
        "active_projects": 0,
        "completed_projects": 0,
        "total_tasks": 0,
        "completed_tasks": 0,
        "tasks_to_complete": 0,
        "team_members": 0,
        "idle_members": 0,
    }


def test_dashboard_summary_counts(client):
    launch = client.post("/api/projects", json={"name": "Launch"}).json()
    client.post("/api/projects", json={"name": "Archive", "status": "Completed", "progress": 100})
    alice = client.post("/api/team", json={"name": "Alice"}).json()
    client.post("/api/team", json={"name": "Bob"})

    done = client.post(f"/api/projects/{launch['id']}/tasks", json={"name": "done"}).json()
    client.post(f"/api/projects/{launch['id']}/tasks", json={"name": "open", "assigned_to": alice["id"]})
    client.put(f"/api/tasks/{done['id']}", json={"is_complete": True})

    summary = client.get("/api/dashboard/summary").json()

    assert summary == {
        "active_projects": 1,
        "completed_projects": 1,
        "total_tasks": 2,
        "completed_tasks": 1,
        "tasks_to_complete": 1,
        "team_members": 2,
        "idle_members": 1,
    }
