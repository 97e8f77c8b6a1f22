from sqlmodel import select

from app.db.seed import SAMPLE_PASSWORD, seed_database
from app.models.assignment import Assignment
from app.models.project import Project
from app.models.user import User, UserRole
from conftest import auth_headers


def test_seed_endpoint_replaces_everything(client, session, manager):
    manager_email = manager.email
    response = client.post("/api/seed")
    assert response.status_code == 200
    assert response.json()["counts"] == {"users": 6, "projects": 4, "assignments": 6}

    session.expire_all()
    emails = [u.email for u in session.exec(select(User)).all()]
    assert manager_email not in emails
    assert len(session.exec(select(Project)).all()) == 4


def test_seeded_users_can_log_in(client):
    client.post("/api/seed")
    headers = auth_headers(client, "sarah.manager@example.com", SAMPLE_PASSWORD)

    rows = client.get("/api/analytics/utilization", headers=headers).json()
    by_name = {row["name"]: row for row in rows}
    assert by_name["John Doe"]["utilization"] == 80.0
    assert by_name["Alex Wilson"]["utilization"] == 100.0
    # Emma's full-time assignment already ended
    assert by_name["Emma Brown"]["current_allocation"] == 40


def test_seed_is_repeatable(session):
    seed_database(session)
    counts = seed_database(session)
    assert counts["assignments"] == 6
    assert len(session.exec(select(Assignment)).all()) == 6
    managers = session.exec(select(User).where(User.role == UserRole.MANAGER)).all()
    assert len(managers) == 2
