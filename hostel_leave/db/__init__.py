from hostel_leave.db.base import Base
from hostel_leave.db.init_db import init_db
from hostel_leave.db.session import create_db_engine, create_session_factory

__all__ = ["Base", "init_db", "create_db_engine", "create_session_factory"]
