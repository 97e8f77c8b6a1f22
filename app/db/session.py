import logging

from sqlmodel import SQLModel, create_engine, Session
from app.core.config import settings

logger = logging.getLogger(__name__)

# Process-scoped engine, created lazily and disposed on application shutdown
_engine = None

def get_engine():
    global _engine

    if _engine is not None:
        return _engine

    # Fallback to a local SQLite file
    db_url = settings.DATABASE_URL or "sqlite:///./erm.db"

    # SQLite fix for multithreading
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}

    _engine = create_engine(db_url, connect_args=connect_args, pool_pre_ping=True)
    return _engine

engine = get_engine()

def init_db(bind=None):
    """Create all tables that don't exist yet."""
    # Import models so they register on SQLModel.metadata
    import app.models  # noqa: F401

    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    logger.info("Database tables ready on %s", bind.url.render_as_string(hide_password=True))

def dispose_engine():
    """Close pooled connections. The engine reconnects on next use."""
    engine.dispose()

def get_db():
    with Session(engine) as session:
        yield session
