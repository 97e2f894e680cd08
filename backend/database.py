import logging
import time

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import settings
from exceptions import DatabaseError

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    """
    Create the SQLAlchemy engine for ``url`` with the configured pool.

    SQLite is only used for local development and tests, so it gets the
    thread-sharing flag instead of pool sizing and driver timeouts.
    """
    if url.startswith('sqlite'):
        return create_engine(
            url,
            connect_args={'check_same_thread': False},
            echo=False,
        )

    return create_engine(
        url,
        echo=False,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=settings.db_conn_max_lifetime,
        connect_args={
            # Bound every round trip so an abandoned request cannot hold a query open
            'connect_timeout': settings.db_query_timeout,
            'read_timeout': settings.db_query_timeout,
            'write_timeout': settings.db_query_timeout,
        },
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def wait_for_database(retries: int | None = None, delay: float | None = None, bind: Engine | None = None) -> None:
    """
    Block until the database answers ``SELECT 1``.

    Args:
        retries: Number of attempts (defaults to ``DB_CONNECT_RETRIES``)
        delay: Seconds between attempts (defaults to ``DB_CONNECT_RETRY_DELAY_SECONDS``)
        bind: Engine to check (defaults to the application engine)

    Raises:
        DatabaseError: If every attempt fails
    """
    retries = retries if retries is not None else settings.db_connect_retries
    delay = delay if delay is not None else settings.db_connect_retry_delay
    bind = bind or engine

    last_error: Exception | None = None
    for attempt in range(1, retries + 1):
        try:
            with bind.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Database connected successfully")
            return
        except SQLAlchemyError as e:
            last_error = e
            logger.warning(f"Database ping failed (attempt {attempt}/{retries}): {e}")
            if attempt < retries:
                time.sleep(delay)

    raise DatabaseError("connect", f"Database ping failed after {retries} attempts: {last_error}")


def init_database(bind: Engine | None = None) -> None:
    """Create missing tables. Existing tables are left untouched."""
    # Register models on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ready")
