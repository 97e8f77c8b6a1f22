from datetime import date, timedelta

from conftest import make_assignment, make_project, make_user


def test_utilization_snapshot(client, session, manager, engineer, manager_headers):
    today = date.today()
    project = make_project(session, manager, start=today - timedelta(days=30), end=today + timedelta(days=30))
    make_assignment(session, engineer, project, 60, today - timedelta(days=5), today)
    make_assignment(session, engineer, project, 20, today, today + timedelta(days=5))
    # Over yesterday, not counted
    make_assignment(session, engineer, project, 15, today - timedelta(days=9), today - timedelta(days=1))

    part_timer = make_user(session, "part@example.com", max_capacity=50, department="QA")
    make_assignment(session, part_timer, project, 25, today, today)
    idle = make_user(session, "idle@example.com", max_capacity=0)

    response = client.get("/api/analytics/utilization", headers=manager_headers)
    assert response.status_code == 200
    rows = {row["engineer_id"]: row for row in response.json()}

    assert set(rows) == {engineer.id, part_timer.id, idle.id}
    assert rows[engineer.id]["current_allocation"] == 80
    assert rows[engineer.id]["utilization"] == 80.0
    assert rows[part_timer.id]["utilization"] == 50.0
    assert rows[part_timer.id]["department"] == "QA"
    assert rows[idle.id]["utilization"] == 0.0


def test_utilization_zero_capacity_with_allocation(client, session, manager, manager_headers):
    today = date.today()
    project = make_project(session, manager, start=today, end=today)
    ghost = make_user(session, "ghost@example.com", max_capacity=0)
    make_assignment(session, ghost, project, 10, today, today)

    rows = client.get("/api/analytics/utilization", headers=manager_headers).json()
    assert rows[0]["utilization"] is None


def test_utilization_manager_only(client, engineer_headers):
    response = client.get("/api/analytics/utilization", headers=engineer_headers)
    assert response.status_code == 403
