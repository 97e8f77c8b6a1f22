"""
User Model Module

This module defines the User model and the UserRole / Seniority enumerations used
for authentication, authorization and capacity planning.
"""
from enum import Enum
from typing import List, Optional
from sqlmodel import SQLModel, Field, JSON, AutoString
import uuid
from datetime import datetime


class UserRole(str, Enum):
    """
    Enumeration of user roles.

    - ENGINEER: Can be assigned to projects; sees only their own assignments
    - MANAGER: Owns projects and manages assignments; sees everything

    The role is fixed when the account is registered.
    """
    ENGINEER = "engineer"
    MANAGER = "manager"


class Seniority(str, Enum):
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"


class UserBase(SQLModel):
    """
    Shared user properties (everything except id, password and timestamps).
    """
    email: str = Field(unique=True, index=True, nullable=False)
    name: str = Field(nullable=False)
    role: UserRole = Field(sa_type=AutoString, nullable=False)

    # Engineer-only profile fields
    skills: List[str] = Field(default_factory=list, sa_type=JSON)
    seniority: Optional[Seniority] = Field(default=None, sa_type=AutoString)

    # 100 for full-time, 50 for part-time
    max_capacity: float = Field(default=100, ge=0)
    department: Optional[str] = None


class User(UserBase, table=True):
    """
    User model representing engineers and managers.

    Users are identified by UUID and authenticated via email/password.

    Attributes:
        id: Unique identifier (UUID) automatically generated for each user
        email: Login email (required, unique, indexed)
        name: Display name
        password: Hashed password (bcrypt)
        role: engineer or manager
        skills: JSON array of skill names (engineers)
        seniority: junior, mid or senior (engineers)
        max_capacity: Percentage of a full-time workload this person can carry
        department: Free-text department name
        created_at: ISO timestamp when the user account was created
        updated_at: ISO timestamp of the last modification
    """
    __tablename__ = "users"

    # Primary key - auto-generated UUID for global uniqueness
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    password: str = Field(nullable=False)  # Hashed password (bcrypt)

    # Audit timestamps
    created_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())
    updated_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())

    @property
    def is_manager(self) -> bool:
        return self.role == UserRole.MANAGER

    @property
    def is_engineer(self) -> bool:
        return self.role == UserRole.ENGINEER


class UserRead(UserBase):
    """Schema for returning a user to clients (password excluded)."""
    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class EngineerWithCapacity(UserRead):
    """Engineer listing entry with capacity over the default one-month window."""
    available_capacity: float
