"""
User Service

Handles business logic for user operations: date-of-birth validation,
persistence through the repository, and building responses with the
derived age.
"""

from typing import Callable, List, Optional

from dtos.internal.user_record import UserRecord
from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse
from exceptions import ValidationError
from repositories.interfaces import IUserRepository
from services.interfaces import IUserService
from utils.date_utils import calculate_age, format_date, parse_date

# Called with the record and the parse error for every row list_users drops
SkipListener = Callable[[UserRecord, ValidationError], None]


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(self, repository: IUserRepository, skip_listener: Optional[SkipListener] = None):
        """
        Initialize UserService.

        Args:
            repository: User repository
            skip_listener: Optional callback notified when ``list_users``
                skips a row whose stored date of birth does not parse
        """
        self.repository = repository
        self.skip_listener = skip_listener

    def create_user(self, request: CreateUserRequest) -> UserResponse:
        parse_date(request.dob)

        user_id = self.repository.create(request.name, request.dob)

        # Re-read so the response reflects what was actually stored
        return self._to_response(self.repository.get_by_id(user_id))

    def get_user(self, user_id: int) -> UserResponse:
        return self._to_response(self.repository.get_by_id(user_id))

    def list_users(self) -> List[UserResponse]:
        """
        Get all users ordered by ID.

        Rows whose stored date of birth does not parse are left out of the
        result instead of failing the whole listing; each one is reported to
        ``skip_listener``.
        """
        responses = []
        for record in self.repository.list():
            try:
                responses.append(self._to_response(record))
            except ValidationError as e:
                if self.skip_listener is not None:
                    self.skip_listener(record, e)
        return responses

    def update_user(self, user_id: int, request: UpdateUserRequest) -> UserResponse:
        parse_date(request.dob)

        self.repository.update(user_id, request.name, request.dob)

        # A missing ID is a no-op update; the re-read raises NotFoundError
        return self._to_response(self.repository.get_by_id(user_id))

    def delete_user(self, user_id: int) -> None:
        self.repository.delete(user_id)

    @staticmethod
    def _to_response(record: UserRecord) -> UserResponse:
        dob = parse_date(record.dob)
        return UserResponse(
            id=record.id,
            name=record.name,
            dob=format_date(dob),
            age=calculate_age(dob),
        )
