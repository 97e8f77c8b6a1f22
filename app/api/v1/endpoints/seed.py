from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.db.session import get_db
from app.db.seed import seed_database, SAMPLE_PASSWORD

router = APIRouter()

@router.post("")
def seed(db: Session = Depends(get_db)):
    """
    Wipe every table and load the sample data set.

    Development only; the router is mounted only when ENABLE_SEED_ENDPOINT is set.
    """
    counts = seed_database(db)
    return {
        "status": "success",
        "detail": "Database seeded",
        "counts": counts,
        "sample_password": SAMPLE_PASSWORD,
    }
