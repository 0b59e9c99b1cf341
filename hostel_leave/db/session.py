"""Database engine and session management."""
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from hostel_leave.config.settings import Settings


def create_db_engine(settings: Settings) -> Engine:
    """
    Build the pooled engine for the configured DATABASE_URL.

    SQLite gets a thread-tolerant connection instead of pool sizing,
    since FastAPI runs sync handlers in a threadpool.
    """
    url = settings.DATABASE_URL
    kwargs: Dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": settings.DB_ECHO,
    }
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_POOL_OVERFLOW
        kwargs["pool_recycle"] = 3600
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
