"""
Tests for the placeholder projects endpoints.

Usage:
    python -m pytest tests/test_projects.py -v
"""

import anyio
import httpx
import pytest

from projects import service

IDS = ["1", "42", "abc", "my-project_01", "Ünïcödé", "a b", "!$&'()*+,;=:@"]


def test_list_projects(client):
    resp = client.get("/api/v1/projects")
    assert resp.status_code == 200
    assert resp.json() == {"projects": [], "message": "Projects endpoint - coming soon"}


def test_create_project_without_body(client):
    resp = client.post("/api/v1/projects")
    assert resp.status_code == 201
    assert resp.json() == {"message": "Create project endpoint - coming soon"}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"name": "demo", "tags": ["a"]}},
        {"content": b"", "headers": {"content-type": "application/json"}},
        {"content": b"{not json", "headers": {"content-type": "application/json"}},
        {"content": b"plain text", "headers": {"content-type": "text/plain"}},
    ],
)
def test_create_project_ignores_body(client, kwargs):
    resp = client.post("/api/v1/projects", **kwargs)
    assert resp.status_code == 201
    assert resp.json() == {"message": "Create project endpoint - coming soon"}


@pytest.mark.parametrize("project_id", IDS)
def test_get_project_echoes_id(client, project_id):
    resp = client.get(f"/api/v1/projects/{project_id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": project_id, "message": "Get project endpoint - coming soon"}


@pytest.mark.parametrize("project_id", IDS)
def test_update_project_echoes_id(client, project_id):
    resp = client.put(f"/api/v1/projects/{project_id}", json={"name": "ignored"})
    assert resp.status_code == 200
    assert resp.json() == {"id": project_id, "message": "Update project endpoint - coming soon"}


@pytest.mark.parametrize("project_id", IDS)
def test_delete_project_echoes_id(client, project_id):
    resp = client.delete(f"/api/v1/projects/{project_id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": project_id, "message": "Delete project endpoint - coming soon"}


def test_percent_encoded_id_is_decoded(client):
    resp = client.get("/api/v1/projects/hello%20world")
    assert resp.status_code == 200
    assert resp.json()["id"] == "hello world"


def test_empty_id_redirects_to_collection(client):
    resp = client.get("/api/v1/projects/", follow_redirects=False)
    assert resp.status_code in (301, 307, 308)
    assert resp.headers["location"].endswith("/api/v1/projects")


def test_unknown_route_is_404(client):
    resp = client.get("/api/v1/unknown")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Not Found"}


def test_wrong_method_is_405(client):
    resp = client.patch("/api/v1/projects/1")
    assert resp.status_code == 405
    assert resp.json() == {"detail": "Method Not Allowed"}


def test_service_returns_fresh_payloads():
    first = service.list_projects()
    first.projects.append("leak")
    assert service.list_projects().projects == []


@pytest.mark.anyio
async def test_concurrent_requests_are_independent(app):
    transport = httpx.ASGITransport(app=app)
    results: dict[str, dict] = {}

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:

        async def fetch(project_id: str) -> None:
            resp = await ac.get(f"/api/v1/projects/{project_id}")
            assert resp.status_code == 200
            results[project_id] = resp.json()

        async with anyio.create_task_group() as tg:
            for i in range(50):
                tg.start_soon(fetch, f"p{i}")
            tg.start_soon(fetch, "p-extra")

    assert len(results) == 51
    for project_id, body in results.items():
        assert body == {"id": project_id, "message": "Get project endpoint - coming soon"}
