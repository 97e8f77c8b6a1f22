"""
Assignment Model Module

An Assignment commits a share of an engineer's capacity (allocation_percentage)
to a project for a date window. Overlapping assignments of the same engineer add up
when capacity is computed (see app.services.capacity).
"""
from datetime import date, datetime
from typing import Optional
from sqlmodel import SQLModel, Field, Relationship
import uuid

from app.models.user import User, UserRead
from app.models.project import Project, ProjectRead


class AssignmentBase(SQLModel):
    """
    Base Assignment model containing common fields.
    """
    engineer_id: str = Field(foreign_key="users.id", nullable=False, index=True)
    project_id: str = Field(foreign_key="projects.id", nullable=False, index=True)

    # Share of the engineer's full-time capacity, 0-100
    allocation_percentage: float = Field(nullable=False, ge=0, le=100)

    # Both bounds inclusive
    start_date: date = Field(nullable=False)
    end_date: date = Field(nullable=False)

    # Free text, e.g. "Developer", "Tech Lead"
    role: str = Field(default="Developer")


class Assignment(AssignmentBase, table=True):
    """
    Assignment table model.
    """
    __tablename__ = "assignments"

    # Primary key
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    # Audit timestamps
    created_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())
    updated_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())

    engineer: Optional[User] = Relationship()
    project: Optional[Project] = Relationship()


class AssignmentCreate(SQLModel):
    """Every field is required on creation, role included."""
    engineer_id: str
    project_id: str
    allocation_percentage: float = Field(ge=0, le=100)
    start_date: date
    end_date: date
    role: str


class AssignmentUpdate(SQLModel):
    engineer_id: Optional[str] = None
    project_id: Optional[str] = None
    allocation_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    role: Optional[str] = None


class AssignmentRead(AssignmentBase):
    """Schema for reading basic assignment data."""
    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class AssignmentReadWithDetails(AssignmentRead):
    """Schema for reading an assignment with engineer and project populated."""
    engineer: Optional[UserRead] = None
    project: Optional[ProjectRead] = None
