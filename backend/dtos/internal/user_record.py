"""
Internal User DTOs

Plain records handed from the repository to the service layer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """
    A user row as stored.

    ``dob`` is the raw stored text; it has not been parsed or normalized.
    """

    id: int
    name: str
    dob: str
