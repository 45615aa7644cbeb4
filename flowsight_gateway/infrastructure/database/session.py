"""Database session management with connection pooling"""

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from flowsight_gateway.config import settings


def engine_options(database_url: str) -> dict:
    """
    Engine keyword arguments for a database URL.

    PostgreSQL gets a small pool recycled hourly (single-user service). SQLite,
    used for local runs, keeps SQLAlchemy's default pool and may be shared
    across the request threads.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 5,
        "pool_recycle": 3600,
    }


engine = create_engine(settings.database_url, **engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Yield one session per request, closed afterwards"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
