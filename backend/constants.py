"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
application so routes, services and bootstrap code share one definition.
"""


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


class ErrorMessages:
    """Client-facing error messages returned in ``{"error": ...}`` bodies"""

    INVALID_BODY = "Invalid request body"
    INVALID_USER_ID = "Invalid user ID"
    INTERNAL = "Internal server error"


class UserIdBounds:
    """
    Valid range for user identifiers.

    Identifiers are stored in a signed 32-bit INT column.
    """

    MIN = -(2 ** 31)
    MAX = 2 ** 31 - 1


class UserFieldLimits:
    """Column widths of the users table; longer input is rejected with 400"""

    NAME_MAX_LENGTH = 255
    DOB_MAX_LENGTH = 64


class ServerConfig:
    """Server configuration defaults"""

    APP_NAME = "User Management API"
    VERSION = "1.0.0"
    HOST = "0.0.0.0"
    PORT = 3000


class DatabaseDefaults:
    """Connection and pool defaults for the relational store"""

    HOST = "localhost"
    PORT = 3306
    USER = "root"
    PASSWORD = ""
    NAME = "userdb"
    DRIVER = "mysql+pymysql"

    # Pool: at most POOL_SIZE + MAX_OVERFLOW open connections
    POOL_SIZE = 25
    MAX_OVERFLOW = 0
    CONN_MAX_LIFETIME_SECONDS = 300
    QUERY_TIMEOUT_SECONDS = 30

    # Startup connectivity check
    CONNECT_RETRIES = 5
    CONNECT_RETRY_DELAY_SECONDS = 2.0


class LoggingConfig:
    """Logging format and rotation settings"""

    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5
