"""Tests for UserService."""
from datetime import date
from unittest.mock import MagicMock

import pytest

from dtos.internal.user_record import UserRecord
from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse
from exceptions import DatabaseError, InvalidDateFormat, NotFoundError
from repositories.interfaces import IUserRepository
from services.user_service import UserService
from utils.date_utils import calculate_age


@pytest.fixture
def repository():
    """Repository double following the IUserRepository contract"""
    return MagicMock(spec=IUserRepository)


@pytest.fixture
def service(repository):
    return UserService(repository)


class TestCreateUser:

    def test_returns_stored_user_with_age(self, service, repository):
        repository.create.return_value = 7
        repository.get_by_id.return_value = UserRecord(7, "Ada", "1990-12-10T00:00:00Z")

        result = service.create_user(CreateUserRequest(name="Ada", dob="1990-12-10T00:00:00Z"))

        repository.create.assert_called_once_with("Ada", "1990-12-10T00:00:00Z")
        repository.get_by_id.assert_called_once_with(7)
        assert result == UserResponse(
            id=7, name="Ada", dob="1990-12-10", age=calculate_age(date(1990, 12, 10))
        )

    def test_invalid_dob_rejected_before_storage(self, service, repository):
        with pytest.raises(InvalidDateFormat):
            service.create_user(CreateUserRequest(name="Ada", dob="not-a-date"))

        repository.create.assert_not_called()

    def test_storage_error_propagates(self, service, repository):
        repository.create.side_effect = DatabaseError("create", "connection refused")

        with pytest.raises(DatabaseError):
            service.create_user(CreateUserRequest(name="Ada", dob="1990-12-10"))


class TestGetUser:

    def test_normalizes_dob(self, service, repository):
        repository.get_by_id.return_value = UserRecord(1, "Grace", "1906-12-09T08:00:00-05:00")

        result = service.get_user(1)

        assert result.dob == "1906-12-09"
        assert result.age == calculate_age(date(1906, 12, 9))

    def test_missing_user_raises_not_found(self, service, repository):
        repository.get_by_id.side_effect = NotFoundError("user", 5)

        with pytest.raises(NotFoundError):
            service.get_user(5)

    def test_unparseable_stored_dob_raises(self, service, repository):
        repository.get_by_id.return_value = UserRecord(1, "Broken", "yesterday")

        with pytest.raises(InvalidDateFormat):
            service.get_user(1)


class TestListUsers:

    def test_empty_repository_returns_empty_list(self, service, repository):
        repository.list.return_value = []
        assert service.list_users() == []

    def test_skips_rows_with_unparseable_dob(self, service, repository):
        repository.list.return_value = [
            UserRecord(1, "Ada", "1990-12-10"),
            UserRecord(2, "Broken", "yesterday"),
            UserRecord(3, "Grace", "1906-12-09"),
        ]

        result = service.list_users()

        assert [u.id for u in result] == [1, 3]

    def test_all_rows_unparseable_returns_empty_list(self, service, repository):
        repository.list.return_value = [UserRecord(1, "Broken", "yesterday")]
        assert service.list_users() == []

    def test_skip_listener_notified(self, repository):
        listener = MagicMock()
        service = UserService(repository, skip_listener=listener)
        broken = UserRecord(2, "Broken", "yesterday")
        repository.list.return_value = [UserRecord(1, "Ada", "1990-12-10"), broken]

        service.list_users()

        listener.assert_called_once()
        record, error = listener.call_args.args
        assert record == broken
        assert isinstance(error, InvalidDateFormat)


class TestUpdateUser:

    def test_updates_then_rereads(self, service, repository):
        repository.get_by_id.return_value = UserRecord(4, "A", "1990-01-01")

        result = service.update_user(4, UpdateUserRequest(name="A", dob="1990-01-01"))

        repository.update.assert_called_once_with(4, "A", "1990-01-01")
        repository.get_by_id.assert_called_once_with(4)
        assert result == UserResponse(id=4, name="A", dob="1990-01-01", age=calculate_age(date(1990, 1, 1)))

    def test_invalid_dob_rejected_before_storage(self, service, repository):
        with pytest.raises(InvalidDateFormat):
            service.update_user(4, UpdateUserRequest(name="A", dob="01/01/1990"))

        repository.update.assert_not_called()

    def test_missing_user_raises_not_found_after_update(self, service, repository):
        repository.get_by_id.side_effect = NotFoundError("user", 4)

        with pytest.raises(NotFoundError):
            service.update_user(4, UpdateUserRequest(name="A", dob="1990-01-01"))

        repository.update.assert_called_once()


def test_delete_user_delegates(service, repository):
    service.delete_user(9)
    repository.delete.assert_called_once_with(9)


class TestWithRealRepository:
    """End-to-end through UserRepository and SQLite."""

    def test_create_then_get(self, user_repository):
        service = UserService(user_repository)

        created = service.create_user(CreateUserRequest(name="Ada", dob="1990-12-10T00:00:00Z"))
        fetched = service.get_user(created.id)

        assert fetched == created
        assert fetched.name == "Ada"
        assert fetched.dob == "1990-12-10"

    def test_update_round_trip(self, user_repository):
        service = UserService(user_repository)
        created = service.create_user(CreateUserRequest(name="Ada", dob="2000-06-01"))

        service.update_user(created.id, UpdateUserRequest(name="A", dob="1990-01-01"))
        fetched = service.get_user(created.id)

        assert fetched.name == "A"
        assert fetched.dob == "1990-01-01"
        assert fetched.age == calculate_age(date(1990, 1, 1))

    def test_update_missing_user(self, user_repository):
        service = UserService(user_repository)

        with pytest.raises(NotFoundError):
            service.update_user(123, UpdateUserRequest(name="A", dob="1990-01-01"))

    def test_list_empty(self, user_repository):
        assert UserService(user_repository).list_users() == []
