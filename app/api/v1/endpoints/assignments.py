"""
Assignment Endpoints Module

This module provides CRUD endpoints for assignments of engineers to projects.
Creation is refused when the requested allocation exceeds the engineer's available
capacity over the assignment window. Updates are applied without re-checking
capacity.
"""
import logging
from contextlib import nullcontext
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from app.core.config import settings
from app.db.session import get_db
from app.models.assignment import (
    Assignment, AssignmentCreate, AssignmentUpdate, AssignmentReadWithDetails
)
from app.models.project import Project
from app.models.user import User
from app.services import capacity
from app.api import deps

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_engineer_or_404(db: Session, engineer_id: str) -> User:
    engineer = db.get(User, engineer_id)
    if not engineer or not engineer.is_engineer:
        raise HTTPException(status_code=404, detail="Engineer not found")
    return engineer


def _ensure_project_exists(db: Session, project_id: str) -> None:
    if not db.get(Project, project_id):
        raise HTTPException(status_code=404, detail="Project not found")


@router.get("", response_model=List[AssignmentReadWithDetails])
def list_assignments(
    engineer_id: Optional[str] = None,
    project_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Retrieve assignments with engineer and project populated.

    Managers see all assignments. Engineers see only their own, whatever
    engineer_id they pass.
    """
    statement = select(Assignment)

    if current_user.is_engineer:
        statement = statement.where(Assignment.engineer_id == current_user.id)
    elif engineer_id:
        statement = statement.where(Assignment.engineer_id == engineer_id)

    # Filter by project if specified
    if project_id:
        statement = statement.where(Assignment.project_id == project_id)

    assignments = db.exec(statement.order_by(Assignment.start_date)).all()
    return assignments


@router.post("", response_model=AssignmentReadWithDetails, status_code=201)
def create_assignment(
    assignment_in: AssignmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.require_manager),
):
    """
    Assign an engineer to a project.

    Raises:
        HTTPException 404: If the engineer or project doesn't exist
        HTTPException 400: If the allocation exceeds the engineer's available capacity
    """
    engineer = _get_engineer_or_404(db, assignment_in.engineer_id)
    _ensure_project_exists(db, assignment_in.project_id)

    # Check and insert under the engineer's lock so concurrent requests can't
    # both pass the capacity check
    if settings.SERIALIZE_ASSIGNMENT_CREATION:
        guard = capacity.engineer_lock(engineer.id)
    else:
        guard = nullcontext()

    with guard:
        available = capacity.get_available_capacity(
            db, engineer.id, assignment_in.start_date, assignment_in.end_date
        )
        if assignment_in.allocation_percentage > available:
            logger.info(
                "Rejected %g%% assignment for engineer %s: %g%% available",
                assignment_in.allocation_percentage, engineer.id, available,
            )
            raise HTTPException(
                status_code=400,
                detail=f"Insufficient capacity. Engineer has {available:g}% available for this period.",
            )

        assignment = Assignment(**assignment_in.model_dump())
        db.add(assignment)
        db.commit()

    db.refresh(assignment)
    return assignment


@router.put("/{assignment_id}", response_model=AssignmentReadWithDetails)
def update_assignment(
    assignment_id: str,
    assignment_in: AssignmentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.require_manager),
):
    """
    Update an existing assignment with every field present in the body.

    Capacity is not re-validated, but a new engineer or project must exist.

    Raises:
        HTTPException 404: If the assignment, engineer or project doesn't exist
    """
    assignment = db.get(Assignment, assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")

    update_data = assignment_in.model_dump(exclude_unset=True, exclude_none=True)
    if "engineer_id" in update_data:
        _get_engineer_or_404(db, update_data["engineer_id"])
    if "project_id" in update_data:
        _ensure_project_exists(db, update_data["project_id"])

    for key, value in update_data.items():
        setattr(assignment, key, value)
    assignment.updated_at = datetime.utcnow().isoformat()

    db.add(assignment)
    db.commit()
    db.refresh(assignment)
    return assignment


@router.delete("/{assignment_id}")
def delete_assignment(
    assignment_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.require_manager),
):
    """
    Delete an assignment.

    Raises:
        HTTPException 404: If the assignment doesn't exist
    """
    assignment = db.get(Assignment, assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")

    db.delete(assignment)
    db.commit()
    return {"status": "success", "detail": "Assignment deleted"}
