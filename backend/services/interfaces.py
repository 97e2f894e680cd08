"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse


class IUserService(ABC):
    """
    Abstract interface for user management services.

    Implementations hold no per-request state and are safe to share across
    concurrent requests.
    """

    @abstractmethod
    def create_user(self, request: CreateUserRequest) -> UserResponse:
        """
        Create a user and return it as stored.

        Args:
            request: Validated create payload

        Returns:
            UserResponse for the new user

        Raises:
            ValidationError: If ``dob`` is not a recognized date
            DatabaseError: If storage fails
        """
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> UserResponse:
        """
        Get one user.

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    def list_users(self) -> List[UserResponse]:
        """
        Get all users ordered by ID.

        Returns:
            List of users (possibly empty)
        """
        pass

    @abstractmethod
    def update_user(self, user_id: int, request: UpdateUserRequest) -> UserResponse:
        """
        Replace a user's name and date of birth.

        Raises:
            ValidationError: If ``dob`` is not a recognized date
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """
        Delete a user. Deleting a missing user is not an error.
        """
        pass
