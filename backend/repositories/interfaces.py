"""
Repository Interfaces

Abstract base classes for the data access layer. Services depend on these
contracts rather than on SQLAlchemy, so tests can substitute doubles.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos.internal.user_record import UserRecord


class IUserRepository(ABC):
    """
    Abstract interface for user persistence.

    Every method issues a single statement. Storage failures surface as
    ``DatabaseError``.
    """

    @abstractmethod
    def create(self, name: str, dob: str) -> int:
        """
        Insert a user.

        Args:
            name: Display name
            dob: Date of birth as submitted

        Returns:
            The system-assigned user ID

        Raises:
            DatabaseError: On constraint violation or connectivity failure
        """
        pass

    @abstractmethod
    def get_by_id(self, user_id: int) -> UserRecord:
        """
        Fetch one user.

        Raises:
            NotFoundError: If no row has this ID
            DatabaseError: If the query fails
        """
        pass

    @abstractmethod
    def list(self) -> List[UserRecord]:
        """
        Fetch all users ordered by ascending ID.

        Returns:
            List of records (empty when the table is empty)
        """
        pass

    @abstractmethod
    def update(self, user_id: int, name: str, dob: str) -> None:
        """
        Replace a user's name and date of birth.

        Updating an ID that does not exist is not an error.
        """
        pass

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """
        Remove a user.

        Deleting an ID that does not exist is not an error.
        """
        pass
