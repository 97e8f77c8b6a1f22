"""
Engineer Endpoints Module

Read-only views over engineers and their remaining capacity. Available to every
authenticated user.
"""
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select
from app.db.session import get_db
from app.models.user import User, UserRead, UserRole, EngineerWithCapacity
from app.services import capacity
from app.api import deps

router = APIRouter()


@router.get("", response_model=List[EngineerWithCapacity])
def list_engineers(
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    List all engineers with their available capacity from today until the same
    day next month.
    """
    today = date.today()
    window_end = capacity.one_month_after(today)

    engineers = db.exec(select(User).where(User.role == UserRole.ENGINEER)).all()
    return [
        EngineerWithCapacity(
            **UserRead.model_validate(engineer).model_dump(),
            available_capacity=capacity.get_available_capacity(db, engineer.id, today, window_end),
        )
        for engineer in engineers
    ]


@router.get("/{engineer_id}", response_model=UserRead)
def read_engineer(
    engineer_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Get a single engineer.

    Raises:
        HTTPException 404: If no engineer has this id
    """
    engineer = db.get(User, engineer_id)
    if not engineer or not engineer.is_engineer:
        raise HTTPException(status_code=404, detail="Engineer not found")
    return engineer


@router.get("/{engineer_id}/capacity")
def read_engineer_capacity(
    engineer_id: str,
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Available capacity of an engineer over [startDate, endDate], both inclusive.

    An unknown engineer reports 0 rather than 404.
    """
    available = capacity.get_available_capacity(db, engineer_id, start_date, end_date)
    return {
        "engineer_id": engineer_id,
        "start_date": start_date,
        "end_date": end_date,
        "available_capacity": available,
    }
