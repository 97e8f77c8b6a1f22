"""
Analytics Endpoints Module

Manager-only reporting over current assignments.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlmodel import Session, select
from app.db.session import get_db
from app.models.user import User, UserRole
from app.services import capacity
from app.api import deps

router = APIRouter()


class EngineerUtilization(BaseModel):
    engineer_id: str
    name: str
    department: Optional[str] = None
    current_allocation: float
    max_capacity: float
    # None when max_capacity is 0 but something is still allocated
    utilization: Optional[float] = None


@router.get("/utilization", response_model=List[EngineerUtilization])
def read_utilization(
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.require_manager),
):
    """
    Per-engineer utilization for today.

    Sums the allocations of assignments covering today's date and reports them as a
    percentage of each engineer's max_capacity.
    """
    today = date.today()
    engineers = db.exec(select(User).where(User.role == UserRole.ENGINEER)).all()

    report = []
    for engineer in engineers:
        current = capacity.get_current_allocation(db, engineer.id, today)
        report.append(EngineerUtilization(
            engineer_id=engineer.id,
            name=engineer.name,
            department=engineer.department,
            current_allocation=current,
            max_capacity=engineer.max_capacity,
            utilization=capacity.compute_utilization(current, engineer.max_capacity),
        ))
    return report
