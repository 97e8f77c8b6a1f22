"""
Capacity Service Module

Capacity and utilization arithmetic over assignment windows.

Two date intervals overlap when each one's start is on or before the other's end,
so an assignment ending on the first day of a query window still counts.
"""
import calendar
import threading
from contextlib import contextmanager
from datetime import date
from typing import Dict, Iterator, List, Optional

from sqlmodel import Session, select

from app.models.assignment import Assignment
from app.models.user import User


def find_overlapping_assignments(
    db: Session, engineer_id: str, start_date: date, end_date: date
) -> List[Assignment]:
    """Assignments of one engineer whose window intersects [start_date, end_date]."""
    statement = select(Assignment).where(
        Assignment.engineer_id == engineer_id,
        Assignment.start_date <= end_date,
        Assignment.end_date >= start_date,
    )
    return list(db.exec(statement).all())


def get_available_capacity(
    db: Session, engineer_id: str, start_date: date, end_date: date
) -> float:
    """
    Capacity an engineer has left over a date range.

    Returns max(0, max_capacity - sum of overlapping allocations). An unknown
    engineer yields 0, the same as a fully booked one.
    """
    engineer = db.get(User, engineer_id)
    if not engineer:
        return 0.0

    overlapping = find_overlapping_assignments(db, engineer_id, start_date, end_date)
    total_allocated = float(sum(a.allocation_percentage for a in overlapping))
    return max(0.0, engineer.max_capacity - total_allocated)


def get_current_allocation(db: Session, engineer_id: str, on_date: date) -> float:
    """Sum of allocations active on a single day."""
    overlapping = find_overlapping_assignments(db, engineer_id, on_date, on_date)
    return float(sum(a.allocation_percentage for a in overlapping))


def compute_utilization(current_allocation: float, max_capacity: float) -> Optional[float]:
    """
    Allocation as a percentage of max_capacity.

    Zero capacity has no meaningful ratio: returns 0.0 when nothing is allocated
    and None otherwise.
    """
    if max_capacity == 0:
        return 0.0 if current_allocation == 0 else None
    return current_allocation / max_capacity * 100


def one_month_after(day: date) -> date:
    """Same day next month, clamped to that month's last day."""
    year = day.year + day.month // 12
    month = day.month % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


# Per-engineer locks for the assignment check-and-insert. Process-local only.
# One entry per engineer ever seen; never pruned, which is bounded by the size
# of the users table.
_engineer_locks: Dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


def get_engineer_lock(engineer_id: str) -> threading.Lock:
    with _registry_lock:
        return _engineer_locks.setdefault(engineer_id, threading.Lock())


@contextmanager
def engineer_lock(engineer_id: str) -> Iterator[None]:
    with get_engineer_lock(engineer_id):
        yield
