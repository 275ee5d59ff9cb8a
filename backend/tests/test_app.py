# ruff: noqa

from app.core.config import settings


def test_root_health_message(client):
    assert client.get("/").json() == {"message": "Tracker API running"}
    assert client.get("/healthz").json() == {"ok": True}


def test_api_is_open_without_token(client):
    assert client.get("/api/projects").status_code == 200


def test_api_requires_bearer_token_when_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "local_auth_token", "s3cret")

    assert client.get("/api/projects").status_code == 401
    assert client.get("/api/projects", headers={"Authorization": "Bearer nope"}).status_code == 401
    non_ascii = {"Authorization": "Bearer caf\xe9".encode("latin-1")}
    assert client.get("/api/projects", headers=non_ascii).status_code == 401
    ok = client.get("/api/projects", headers={"Authorization": "Bearer s3cret"})
    assert ok.status_code == 200
    # Health routes stay public.
    assert client.get("/healthz").status_code == 200
