"""
Base repository providing shared session handling.
"""

from contextlib import contextmanager
from typing import Generic, Iterator, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import DatabaseError

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    @contextmanager
    def storage_operation(self, operation: str) -> Iterator[None]:
        """
        Run a block of session work, translating driver failures.

        The session is rolled back on failure so it stays usable, and the
        error is re-raised as ``DatabaseError`` with the driver's message.

        Args:
            operation: Operation name recorded on the error
        """
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(operation, str(e.orig) if getattr(e, 'orig', None) else str(e)) from e
