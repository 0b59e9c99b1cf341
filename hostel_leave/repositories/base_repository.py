"""
Base repository with the CRUD operations and error translation shared
by the student and leave repositories.
"""

from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from hostel_leave.config.logging import get_logger
from hostel_leave.core.exceptions import BaseAppException, handle_database_exception
from hostel_leave.db.base import Base

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repository over a single model bound to one request-scoped session.

    SQLAlchemy errors never leave a repository: they are rolled back and
    re-raised as application exceptions.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Commit on success, roll back and translate on failure.

        Usage:
            with repository.transaction():
                repository.add(entity)
        """
        try:
            yield self.db
            self.db.commit()
        except BaseAppException:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback on {self.table_name}: {str(e)}", exc_info=True)
            raise handle_database_exception(e, table=self.table_name) from e
        except Exception:
            self.db.rollback()
            raise

    # ==================== Create Operations ====================

    def add(self, entity: ModelType) -> ModelType:
        """Stage an entity and flush so generated keys are available."""
        try:
            self.db.add(entity)
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise handle_database_exception(e, table=self.table_name) from e
        return entity

    # ==================== Read Operations ====================

    def get_by_id(self, entity_id: Any) -> Optional[ModelType]:
        try:
            return self.db.get(self.model, entity_id)
        except SQLAlchemyError as e:
            logger.error(f"Lookup failed on {self.table_name}: {str(e)}", exc_info=True)
            raise handle_database_exception(e, table=self.table_name) from e
