"""
User API endpoints
"""
import re
from typing import List

from fastapi import APIRouter, Depends, Response

from constants import ErrorMessages, HTTPStatus, UserIdBounds
from dependencies import get_user_service
from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse
from exceptions import ValidationError
from services.interfaces import IUserService
from utils.error_handlers import handle_api_errors

router = APIRouter(prefix="/users")

_USER_ID = re.compile(r'[+-]?[0-9]+')


def parse_user_id(raw: str) -> int:
    """
    Parse a user ID path segment.

    Args:
        raw: Path segment as received

    Returns:
        The ID as an integer

    Raises:
        ValidationError: If the segment is not a decimal integer in the
            range of the ID column
    """
    if not _USER_ID.fullmatch(raw):
        raise ValidationError(ErrorMessages.INVALID_USER_ID, {"id": raw})
    user_id = int(raw)
    if not UserIdBounds.MIN <= user_id <= UserIdBounds.MAX:
        raise ValidationError(ErrorMessages.INVALID_USER_ID, {"id": raw})
    return user_id


@router.post("", response_model=UserResponse, status_code=HTTPStatus.CREATED)
@router.post("/", response_model=UserResponse, status_code=HTTPStatus.CREATED, include_in_schema=False)
@handle_api_errors("Create user")
def create_user(request: CreateUserRequest, service: IUserService = Depends(get_user_service)):
    """
    Create a user.

    ``dob`` may be a bare date or a timestamp; the response always carries
    the normalized ``YYYY-MM-DD`` date and the computed age.
    """
    return service.create_user(request)


@router.get("", response_model=List[UserResponse])
@router.get("/", response_model=List[UserResponse], include_in_schema=False)
@handle_api_errors("List users")
def list_users(service: IUserService = Depends(get_user_service)):
    """List all users ordered by ID."""
    return service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
@handle_api_errors("Get user")
def get_user(user_id: str, service: IUserService = Depends(get_user_service)):
    return service.get_user(parse_user_id(user_id))


@router.put("/{user_id}", response_model=UserResponse)
@handle_api_errors("Update user")
def update_user(
    user_id: str,
    request: UpdateUserRequest,
    service: IUserService = Depends(get_user_service)
):
    """
    Replace a user's name and date of birth.

    Returns 404 when the user does not exist.
    """
    return service.update_user(parse_user_id(user_id), request)


@router.delete("/{user_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Delete user")
def delete_user(user_id: str, service: IUserService = Depends(get_user_service)):
    """Delete a user. Deleting a user that does not exist still succeeds."""
    service.delete_user(parse_user_id(user_id))
    return Response(status_code=HTTPStatus.NO_CONTENT)
