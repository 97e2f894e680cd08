"""
Runtime Configuration

Reads database, server and logging configuration from environment
variables. Every value has a documented default (see ``constants``), so the
service starts against a local MySQL instance with no environment at all.

Set ``DATABASE_URL`` to bypass the ``DB_*`` composition entirely, e.g.
``sqlite:///./users.db`` for local development.
"""
import os
from typing import List, Optional
from urllib.parse import quote_plus

from constants import DatabaseDefaults, ServerConfig


def _env_bool(name: str, default: bool) -> bool:
    """Interpret an environment variable as a boolean flag."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    return int(raw) if raw else default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    return float(raw) if raw else default


class Settings:
    """
    Application settings loaded from environment variables.

    Values are read when the instance is created, so tests can build a fresh
    ``Settings()`` after patching the environment.
    """

    def __init__(self):
        # Database connection
        self.db_host: str = os.environ.get('DB_HOST') or DatabaseDefaults.HOST
        self.db_port: int = _env_int('DB_PORT', DatabaseDefaults.PORT)
        self.db_user: str = os.environ.get('DB_USER') or DatabaseDefaults.USER
        self.db_password: str = os.environ.get('DB_PASSWORD') or DatabaseDefaults.PASSWORD
        self.db_name: str = os.environ.get('DB_NAME') or DatabaseDefaults.NAME
        self.database_url_override: Optional[str] = os.environ.get('DATABASE_URL') or None

        # Connection pool
        self.db_pool_size: int = _env_int('DB_POOL_SIZE', DatabaseDefaults.POOL_SIZE)
        self.db_max_overflow: int = _env_int('DB_MAX_OVERFLOW', DatabaseDefaults.MAX_OVERFLOW)
        self.db_conn_max_lifetime: int = _env_int(
            'DB_CONN_MAX_LIFETIME_SECONDS', DatabaseDefaults.CONN_MAX_LIFETIME_SECONDS
        )
        self.db_query_timeout: int = _env_int(
            'DB_QUERY_TIMEOUT_SECONDS', DatabaseDefaults.QUERY_TIMEOUT_SECONDS
        )

        # Startup
        self.db_connect_retries: int = _env_int('DB_CONNECT_RETRIES', DatabaseDefaults.CONNECT_RETRIES)
        self.db_connect_retry_delay: float = _env_float(
            'DB_CONNECT_RETRY_DELAY_SECONDS', DatabaseDefaults.CONNECT_RETRY_DELAY_SECONDS
        )
        self.db_create_tables: bool = _env_bool('DB_CREATE_TABLES', True)

        # Server
        self.server_host: str = os.environ.get('SERVER_HOST') or ServerConfig.HOST
        self.server_port: int = _env_int('SERVER_PORT', ServerConfig.PORT)
        self.cors_allow_origins: List[str] = [
            origin.strip()
            for origin in os.environ.get('CORS_ALLOW_ORIGINS', '*').split(',')
            if origin.strip()
        ]

        # Logging
        self.log_level: str = os.environ.get('LOG_LEVEL', 'INFO').upper()
        self.log_file: Optional[str] = os.environ.get('LOG_FILE') or None

    @property
    def database_url(self) -> str:
        """
        SQLAlchemy URL for the user store.

        Returns:
            ``DATABASE_URL`` when set, otherwise a MySQL URL composed from
            the ``DB_*`` variables
        """
        if self.database_url_override:
            return self.database_url_override
        return (
            f"{DatabaseDefaults.DRIVER}://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?charset=utf8mb4"
        )


settings = Settings()
