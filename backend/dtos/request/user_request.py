"""
User Request DTOs

DTOs for user create/update API requests.
"""

from pydantic import BaseModel, Field

from constants import UserFieldLimits


class UserPayload(BaseModel):
    """
    Fields shared by create and update requests.

    Only presence and length are checked here; whether ``dob`` is a parseable
    date is decided by the service before anything is written. Lengths are
    capped at the column widths so oversized values are rejected as bad
    input rather than failing in the database.
    """

    name: str = Field(
        min_length=1,
        max_length=UserFieldLimits.NAME_MAX_LENGTH,
        description="Display name",
    )
    dob: str = Field(
        min_length=1,
        max_length=UserFieldLimits.DOB_MAX_LENGTH,
        description="Date of birth, e.g. 1990-01-01 or 1990-01-01T00:00:00Z",
    )


class CreateUserRequest(UserPayload):
    """Request DTO for creating a user."""

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Ada Lovelace",
                "dob": "1990-12-10"
            }
        }


class UpdateUserRequest(UserPayload):
    """Request DTO for replacing a user's name and date of birth."""

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Ada King",
                "dob": "1990-12-10T00:00:00Z"
            }
        }
