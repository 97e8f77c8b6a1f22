from .user import User, UserRole, Seniority
from .project import Project, ProjectStatus
from .assignment import Assignment

__all__ = [
    "User", "UserRole", "Seniority",
    "Project", "ProjectStatus",
    "Assignment",
]
