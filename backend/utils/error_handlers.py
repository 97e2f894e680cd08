"""
Error handling decorators and utilities for API endpoints.

Routes raise domain exceptions; this module is the single place where they
become HTTP statuses. Only messages reach the client, never tracebacks.
"""

import inspect
import logging
from functools import wraps
from typing import Callable

from fastapi import HTTPException

from constants import ErrorMessages, HTTPStatus
from exceptions import (
    ApplicationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Convert an exception raised by a route into an HTTPException.

    Client errors are logged as warnings, server errors as errors with the
    traceback kept in the log.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create user")
        error: The exception raised by the route

    Returns:
        HTTPException with the mapped status and a message detail
    """
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, NotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, DatabaseError):
        logger.error(
            f"{operation_name} - Database error during {error.details.get('operation')}: {error.message}",
            exc_info=error,
        )
        return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=error.message)
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=error.message)

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=ErrorMessages.INTERNAL)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create user")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/users/{user_id}")
        @handle_api_errors("Get user")
        def get_user(...):
            return service.get_user(user_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def validation_error_message(errors: list) -> str:
    """
    Summarize request validation errors as one client-facing message.

    A body that could not be decoded at all (malformed JSON, missing or
    non-object body) yields the generic invalid-body message; field errors
    are reported as ``field: reason`` pairs.

    Args:
        errors: ``RequestValidationError.errors()``

    Returns:
        Message for the ``{"error": ...}`` body
    """
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if error.get("type") in ("json_invalid", "model_attributes_type", "dict_type") or not loc:
            return ErrorMessages.INVALID_BODY
        parts.append(f"{'.'.join(loc)}: {error.get('msg')}")
    return "; ".join(parts) or ErrorMessages.INVALID_BODY
