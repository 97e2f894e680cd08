"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. Tests swap implementations through
``app.dependency_overrides``.
"""

import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from dtos.internal.user_record import UserRecord
from exceptions import ValidationError
from repositories.interfaces import IUserRepository
from repositories.user_repository import UserRepository
from services.interfaces import IUserService
from services.user_service import UserService

logger = logging.getLogger(__name__)


def log_skipped_user(record: UserRecord, error: ValidationError) -> None:
    """Report a user left out of a listing because its stored dob is unreadable."""
    logger.warning(f"Skipping user {record.id} in listing: {error.message}")


def get_user_repository(db: Session = Depends(get_db)) -> IUserRepository:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        IUserRepository: Repository bound to the request's session
    """
    return UserRepository(db)


def get_user_service(repository: IUserRepository = Depends(get_user_repository)) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        repository: User repository (injected)

    Returns:
        IUserService: User service implementation
    """
    return UserService(repository, skip_listener=log_skipped_user)
