"""
Project Endpoints Module

This module provides CRUD endpoints for managing projects. Every authenticated user
can read projects; only managers can create, update or delete them. A project that
still has assignments cannot be deleted.
"""
import logging
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from app.db.session import get_db
from app.models.assignment import Assignment
from app.models.project import (
    Project, ProjectCreate, ProjectUpdate, ProjectReadWithManager, ProjectStatus
)
from app.models.user import User
from app.api import deps

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_manager_exists(db: Session, manager_id: str) -> None:
    manager = db.get(User, manager_id)
    if not manager or not manager.is_manager:
        raise HTTPException(status_code=400, detail="Manager not found")


@router.get("", response_model=List[ProjectReadWithManager])
def list_projects(
    status: Optional[ProjectStatus] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Retrieve all projects with their manager populated.

    Args:
        status: Optional status filter (planning, active, completed)
        db: Database session
        current_user: Currently authenticated user

    Returns:
        List[ProjectReadWithManager]: List of project objects
    """
    statement = select(Project)
    if status:
        statement = statement.where(Project.status == status)

    projects = db.exec(statement.order_by(Project.start_date)).all()
    return projects


@router.get("/{project_id}", response_model=ProjectReadWithManager)
def read_project(
    project_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Get a specific project by ID.

    Raises:
        HTTPException 404: If the project doesn't exist
    """
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.post("", response_model=ProjectReadWithManager, status_code=201)
def create_project(
    project_in: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.require_manager),
):
    """
    Create a new project.

    If manager_id is not specified, it defaults to the calling manager.

    Raises:
        HTTPException 400: If manager_id doesn't reference a manager
    """
    project_data = project_in.model_dump()

    # Default manager to current user if not provided
    if not project_data.get("manager_id"):
        project_data["manager_id"] = current_user.id
    else:
        _ensure_manager_exists(db, project_data["manager_id"])

    project = Project(**project_data)
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


@router.put("/{project_id}", response_model=ProjectReadWithManager)
def update_project(
    project_id: str,
    project_in: ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.require_manager),
):
    """
    Update an existing project with every field present in the body.

    Raises:
        HTTPException 404: If the project doesn't exist
        HTTPException 400: If a new manager_id doesn't reference a manager
    """
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    # description is the only column that may be cleared
    update_data = {
        key: value
        for key, value in project_in.model_dump(exclude_unset=True).items()
        if value is not None or key == "description"
    }
    if "manager_id" in update_data:
        _ensure_manager_exists(db, update_data["manager_id"])

    for key, value in update_data.items():
        setattr(project, key, value)
    project.updated_at = datetime.utcnow().isoformat()

    db.add(project)
    db.commit()
    db.refresh(project)
    return project


@router.delete("/{project_id}")
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.require_manager),
):
    """
    Delete a project.

    Returns:
        dict: Success message

    Raises:
        HTTPException 404: If the project doesn't exist
        HTTPException 400: If any assignment still references the project
    """
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    assignment = db.exec(
        select(Assignment).where(Assignment.project_id == project_id)
    ).first()
    if assignment:
        logger.info("Refused to delete project %s: assignments exist", project_id)
        raise HTTPException(
            status_code=400,
            detail="Cannot delete project with existing assignments"
        )

    db.delete(project)
    db.commit()
    return {"status": "success", "detail": "Project deleted"}
