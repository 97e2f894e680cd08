"""
User Response DTOs

DTOs for user API responses.
"""

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """
    Response DTO for a user.

    ``age`` is derived from ``dob`` on every request and never stored.
    """

    id: int = Field(description="User ID")
    name: str = Field(description="Display name")
    dob: str = Field(description="Date of birth (YYYY-MM-DD)")
    age: int = Field(description="Age in whole years")
