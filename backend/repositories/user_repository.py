"""
User repository for user-specific data access operations.
"""

from typing import List

from sqlalchemy.orm import Session

from dtos.internal.user_record import UserRecord
from exceptions import NotFoundError
from models import User
from .base_repository import BaseRepository
from .interfaces import IUserRepository


def _to_record(user: User) -> UserRecord:
    return UserRecord(id=user.id, name=user.name, dob=user.dob)


class UserRepository(BaseRepository[User], IUserRepository):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def create(self, name: str, dob: str) -> int:
        user = User(name=name, dob=dob)
        with self.storage_operation("create"):
            self.db.add(user)
            self.db.commit()
        return user.id

    def get_by_id(self, user_id: int) -> UserRecord:
        with self.storage_operation("get_by_id"):
            user = self.db.query(self.model).filter(self.model.id == user_id).first()
        if user is None:
            raise NotFoundError("user", user_id)
        return _to_record(user)

    def list(self) -> List[UserRecord]:
        with self.storage_operation("list"):
            users = self.db.query(self.model).order_by(self.model.id.asc()).all()
        return [_to_record(user) for user in users]

    def update(self, user_id: int, name: str, dob: str) -> None:
        with self.storage_operation("update"):
            self.db.query(self.model).filter(self.model.id == user_id).update(
                {self.model.name: name, self.model.dob: dob},
                synchronize_session=False,
            )
            self.db.commit()

    def delete(self, user_id: int) -> None:
        with self.storage_operation("delete"):
            self.db.query(self.model).filter(self.model.id == user_id).delete(
                synchronize_session=False,
            )
            self.db.commit()
