"""
Project Model Module

This module defines the Project model along with the request/response schemas used
by the project endpoints. Every project is led by a manager (manager_id).
"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from sqlmodel import SQLModel, Field, JSON, AutoString, Relationship
import uuid

from app.models.user import User, UserRead


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"


class ProjectBase(SQLModel):
    """
    Base Project model containing the client-editable fields.
    """
    # Basic project information
    name: str = Field(nullable=False)
    description: Optional[str] = None

    # Timeline - start_date <= end_date is not enforced
    start_date: date = Field(nullable=False)
    end_date: date = Field(nullable=False)

    # Staffing
    required_skills: List[str] = Field(default_factory=list, sa_type=JSON)
    team_size: int = Field(nullable=False, ge=0)

    status: ProjectStatus = Field(default=ProjectStatus.PLANNING, sa_type=AutoString)


class Project(ProjectBase, table=True):
    """
    Project table model.

    Attributes:
        id: Unique identifier (UUID)
        manager_id: Foreign key to the managing User
        manager: The managing User, loaded on access
        created_at: ISO timestamp when the project was created
        updated_at: ISO timestamp when the project was last modified
    """
    __tablename__ = "projects"

    # Primary key
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    manager_id: str = Field(foreign_key="users.id", nullable=False, index=True)

    # Audit timestamps - automatically managed
    created_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())
    updated_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())

    manager: Optional[User] = Relationship()


class ProjectCreate(ProjectBase):
    """Defaults manager_id to the calling manager when omitted."""
    manager_id: Optional[str] = None


class ProjectUpdate(SQLModel):
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    required_skills: Optional[List[str]] = None
    team_size: Optional[int] = Field(default=None, ge=0)
    status: Optional[ProjectStatus] = None
    manager_id: Optional[str] = None


class ProjectRead(ProjectBase):
    """Schema for reading basic project data."""
    id: str
    manager_id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ProjectReadWithManager(ProjectRead):
    """Schema for reading a project with its manager populated."""
    manager: Optional[UserRead] = None
