from datetime import date

from app.models.project import Project
from app.models.user import UserRole
from conftest import make_assignment, make_project, make_user

PROJECT_BODY = {
    "name": "Billing Revamp",
    "description": "Replace the invoicing pipeline",
    "start_date": "2025-03-01",
    "end_date": "2025-09-30",
    "required_skills": ["Python", "PostgreSQL"],
    "team_size": 4,
}


def test_manager_creates_project(client, manager, manager_headers):
    response = client.post("/api/projects", json=PROJECT_BODY, headers=manager_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["manager_id"] == manager.id
    assert body["manager"]["email"] == manager.email
    assert body["status"] == "planning"
    assert body["required_skills"] == ["Python", "PostgreSQL"]


def test_create_with_other_manager(client, session, manager_headers):
    other = make_user(session, "boss@example.com", role=UserRole.MANAGER)
    response = client.post(
        "/api/projects", json={**PROJECT_BODY, "manager_id": other.id}, headers=manager_headers
    )
    assert response.status_code == 201
    assert response.json()["manager_id"] == other.id


def test_create_with_engineer_as_manager_rejected(client, engineer, manager_headers):
    response = client.post(
        "/api/projects", json={**PROJECT_BODY, "manager_id": engineer.id}, headers=manager_headers
    )
    assert response.status_code == 400


def test_engineer_cannot_create_project(client, engineer_headers):
    response = client.post("/api/projects", json=PROJECT_BODY, headers=engineer_headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "Manager access required"


def test_create_missing_fields(client, manager_headers):
    response = client.post("/api/projects", json={"name": "Half"}, headers=manager_headers)
    assert response.status_code == 400


def test_list_projects_populates_manager(client, session, manager, engineer_headers):
    make_project(session, manager, name="Later", start=date(2025, 6, 1))
    make_project(session, manager, name="Sooner", start=date(2025, 2, 1))

    response = client.get("/api/projects", headers=engineer_headers)
    assert response.status_code == 200
    body = response.json()
    assert [p["name"] for p in body] == ["Sooner", "Later"]
    assert all(p["manager"]["id"] == manager.id for p in body)
    assert all("password" not in p["manager"] for p in body)


def test_list_projects_status_filter(client, session, manager, manager_headers):
    make_project(session, manager, name="Planned")
    active = make_project(session, manager, name="Running")
    active.status = "active"
    session.add(active)
    session.commit()

    response = client.get("/api/projects", params={"status": "active"}, headers=manager_headers)
    assert [p["name"] for p in response.json()] == ["Running"]


def test_list_projects_requires_auth(client):
    assert client.get("/api/projects").status_code == 401


def test_read_project(client, session, manager, engineer_headers):
    project = make_project(session, manager)
    response = client.get(f"/api/projects/{project.id}", headers=engineer_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Apollo"


def test_read_missing_project(client, manager_headers):
    assert client.get("/api/projects/nope", headers=manager_headers).status_code == 404


def test_update_project(client, session, manager, manager_headers):
    project = make_project(session, manager)
    response = client.put(
        f"/api/projects/{project.id}",
        json={"status": "active", "team_size": 6},
        headers=manager_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "active"
    assert body["team_size"] == 6
    assert body["name"] == "Apollo"


def test_update_project_forbidden_for_engineer(client, session, manager, engineer_headers):
    project = make_project(session, manager)
    response = client.put(f"/api/projects/{project.id}", json={"name": "X"}, headers=engineer_headers)
    assert response.status_code == 403


def test_delete_project_without_assignments(client, session, manager, manager_headers):
    project_id = make_project(session, manager).id
    response = client.delete(f"/api/projects/{project_id}", headers=manager_headers)
    assert response.status_code == 200

    session.expire_all()
    assert session.get(Project, project_id) is None


def test_delete_project_with_assignments_blocked(client, session, manager, engineer, manager_headers):
    project = make_project(session, manager)
    make_assignment(session, engineer, project, 50, date(2025, 1, 1), date(2025, 2, 1))

    response = client.delete(f"/api/projects/{project.id}", headers=manager_headers)
    assert response.status_code == 400

    listing = client.get("/api/assignments", headers=manager_headers).json()
    assert len(listing) == 1
    assert client.get(f"/api/projects/{project.id}", headers=manager_headers).status_code == 200


def test_delete_missing_project(client, manager_headers):
    assert client.delete("/api/projects/nope", headers=manager_headers).status_code == 404
