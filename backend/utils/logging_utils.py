"""
Structured Logging Utilities

Configures the root logger and provides utilities for adding request-scoped
context to log messages.
"""

import logging
import sys
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from constants import LoggingConfig


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger with a console handler and an optional
    rotating file handler.

    Calling this more than once is a no-op, so tests and repeated app
    construction do not stack handlers.

    Args:
        level: Logging level name (e.g. ``"DEBUG"``, ``"INFO"``)
        log_file: Path of a log file to rotate (10MB per file, keep 5 backups)
    """
    root_logger = logging.getLogger()
    if getattr(root_logger, '_user_api_configured', False):
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)

    log_formatter = logging.Formatter(LoggingConfig.FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LoggingConfig.MAX_BYTES,
            backupCount=LoggingConfig.BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(numeric_level)
        root_logger.addHandler(file_handler)

    root_logger._user_api_configured = True
    logging.getLogger(__name__).info(f"Logging initialized at {logging.getLevelName(numeric_level)}"
                                     + (f": {log_file}" if log_file else ""))


def format_fields(fields: Dict[str, Any]) -> str:
    """
    Render structured fields as ``key=value`` pairs.

    Values containing spaces are quoted so each pair stays one token.
    ``None`` values are rendered as ``-``.
    """
    parts = []
    for key, value in fields.items():
        text = "-" if value is None else str(value)
        if " " in text:
            text = '"' + text.replace('"', '\\"') + '"'
        parts.append(f"{key}={text}")
    return " ".join(parts)


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    The logging context and any ``extra`` fields are appended to the message
    as ``key=value`` pairs, so they appear in every handler's output, and are
    also attached to the record for handlers that read attributes.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Request completed", extra={
            "status": 200,
            "latency_ms": 3.2
        })
        # -> "Request completed request_id=... status=200 latency_ms=3.2"
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        fields = self._add_context(extra)
        if fields:
            message = f"{message} {format_fields(fields)}"
        self.logger.info(message, extra=fields)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    emitted through ``StructuredLogger`` within the current context.

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(request_id="abc-123")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})
