"""Database initialization utilities."""
from sqlalchemy.engine import Engine

from hostel_leave.config.logging import get_logger
from hostel_leave.db.base import Base, import_models

logger = get_logger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create any missing tables.

    Existing tables are left untouched, so this is safe to run on every start.
    """
    import_models()
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise
    logger.info("Database tables ready")

