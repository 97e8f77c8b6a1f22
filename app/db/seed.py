"""
Sample data for development databases.

seed_database() is destructive: it deletes every assignment, project and user
before inserting the fixed sample set below. Dates are offsets from today so the
sample stays current.
"""
import logging
from datetime import date, timedelta
from typing import Dict

from sqlalchemy import delete
from sqlmodel import Session

from app.core.security import get_password_hash
from app.models.assignment import Assignment
from app.models.project import Project, ProjectStatus
from app.models.user import User, UserRole, Seniority

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"

MANAGERS = [
    {"email": "sarah.manager@example.com", "name": "Sarah Johnson", "department": "Engineering"},
    {"email": "mike.manager@example.com", "name": "Mike Chen", "department": "Product"},
]

ENGINEERS = [
    {
        "email": "john.doe@example.com", "name": "John Doe",
        "skills": ["React", "Node.js", "TypeScript"], "seniority": Seniority.SENIOR,
        "max_capacity": 100, "department": "Frontend",
    },
    {
        "email": "jane.smith@example.com", "name": "Jane Smith",
        "skills": ["Python", "Django", "PostgreSQL"], "seniority": Seniority.MID,
        "max_capacity": 100, "department": "Backend",
    },
    {
        "email": "alex.wilson@example.com", "name": "Alex Wilson",
        "skills": ["React", "Python", "AWS"], "seniority": Seniority.JUNIOR,
        "max_capacity": 50, "department": "Full Stack",
    },
    {
        "email": "emma.brown@example.com", "name": "Emma Brown",
        "skills": ["Node.js", "MongoDB", "Docker"], "seniority": Seniority.SENIOR,
        "max_capacity": 100, "department": "Backend",
    },
]

# (name, description, start offset, end offset, skills, team size, status, manager index)
PROJECTS = [
    ("E-commerce Platform", "Customer-facing storefront rebuild",
     -30, 90, ["React", "Node.js", "MongoDB"], 4, ProjectStatus.ACTIVE, 0),
    ("Analytics Dashboard", "Internal reporting dashboard",
     -10, 60, ["Python", "React", "PostgreSQL"], 3, ProjectStatus.ACTIVE, 0),
    ("Mobile App", "Companion app for the storefront",
     30, 180, ["React", "TypeScript"], 2, ProjectStatus.PLANNING, 1),
    ("Legacy Migration", "Move billing off the old monolith",
     -120, -15, ["Python", "AWS", "Docker"], 2, ProjectStatus.COMPLETED, 1),
]

# (engineer index, project index, allocation, start offset, end offset, role)
ASSIGNMENTS = [
    (0, 0, 60, -30, 90, "Tech Lead"),
    (0, 1, 20, -10, 60, "Developer"),
    (1, 1, 80, -10, 60, "Tech Lead"),
    (2, 0, 50, -30, 90, "Developer"),
    (3, 0, 40, -30, 90, "Developer"),
    (3, 3, 100, -120, -15, "Developer"),
]


def clear_database(db: Session) -> None:
    # Children first so foreign keys never dangle
    db.execute(delete(Assignment))
    db.execute(delete(Project))
    db.execute(delete(User))
    db.commit()


def seed_database(db: Session) -> Dict[str, int]:
    """
    Wipe all tables and insert the sample data.

    Returns:
        dict: Number of inserted users, projects and assignments
    """
    clear_database(db)

    today = date.today()
    password = get_password_hash(SAMPLE_PASSWORD)

    managers = [User(role=UserRole.MANAGER, password=password, **m) for m in MANAGERS]
    engineers = [User(role=UserRole.ENGINEER, password=password, **e) for e in ENGINEERS]
    db.add_all(managers + engineers)
    db.flush()

    projects = [
        Project(
            name=name,
            description=description,
            start_date=today + timedelta(days=start),
            end_date=today + timedelta(days=end),
            required_skills=skills,
            team_size=team_size,
            status=status,
            manager_id=managers[manager].id,
        )
        for name, description, start, end, skills, team_size, status, manager in PROJECTS
    ]
    db.add_all(projects)
    db.flush()

    assignments = [
        Assignment(
            engineer_id=engineers[engineer].id,
            project_id=projects[project].id,
            allocation_percentage=allocation,
            start_date=today + timedelta(days=start),
            end_date=today + timedelta(days=end),
            role=role,
        )
        for engineer, project, allocation, start, end, role in ASSIGNMENTS
    ]
    db.add_all(assignments)
    db.commit()

    counts = {
        "users": len(managers) + len(engineers),
        "projects": len(projects),
        "assignments": len(assignments),
    }
    logger.warning("Database wiped and reseeded: %s", counts)
    return counts
