"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application. The API layer maps each
class to an HTTP status in ``utils.error_handlers``.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when client input fails validation"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class InvalidDateFormat(ValidationError):
    """Raised when a date string matches none of the accepted layouts"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"invalid date format: {value}", {"dob": str(value)})


class NotFoundError(ApplicationError):
    """Raised when a requested record does not exist"""

    def __init__(self, resource: str, identifier: object):
        details = {"resource": resource, "id": identifier}
        super().__init__(f"{resource} not found: {identifier}", details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
