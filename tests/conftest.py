from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import app.models  # noqa: F401
from app.main import app
from app.db.session import get_db
from app.core.security import get_password_hash
from app.models.assignment import Assignment
from app.models.project import Project
from app.models.user import User, UserRole

PASSWORD = "secret123"


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    def get_db_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = get_db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


# ── factories ──────────────────────────────────────────────────────────────────

def make_user(session, email, role=UserRole.ENGINEER, max_capacity=100, **extra):
    user = User(
        email=email,
        name=email.split("@")[0].title(),
        password=get_password_hash(PASSWORD),
        role=role,
        max_capacity=max_capacity,
        **extra,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def make_project(session, manager, name="Apollo", start=date(2025, 1, 1), end=date(2025, 12, 31)):
    project = Project(
        name=name,
        start_date=start,
        end_date=end,
        team_size=3,
        manager_id=manager.id,
    )
    session.add(project)
    session.commit()
    session.refresh(project)
    return project


def make_assignment(session, engineer, project, allocation, start, end, role="Developer"):
    assignment = Assignment(
        engineer_id=engineer.id,
        project_id=project.id,
        allocation_percentage=allocation,
        start_date=start,
        end_date=end,
        role=role,
    )
    session.add(assignment)
    session.commit()
    session.refresh(assignment)
    return assignment


def auth_headers(client, email, password=PASSWORD):
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def manager(session):
    return make_user(session, "manager@example.com", role=UserRole.MANAGER)


@pytest.fixture
def engineer(session):
    return make_user(session, "engineer@example.com", skills=["Python"])


@pytest.fixture
def manager_headers(client, manager):
    return auth_headers(client, manager.email)


@pytest.fixture
def engineer_headers(client, engineer):
    return auth_headers(client, engineer.email)
