import asyncio
from contextlib import asynccontextmanager
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import users
from config.settings import settings
from constants import ErrorMessages, HTTPStatus, ServerConfig
from database import engine, init_database, wait_for_database
from utils.error_handlers import validation_error_message
from utils.logging_utils import (
    StructuredLogger,
    clear_logging_context,
    set_logging_context,
    setup_logging,
)

logger = logging.getLogger(__name__)
request_logger = StructuredLogger("http.requests")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    # Startup: a DatabaseError here aborts the process
    logger.info(f"Connecting to database at {engine.url.render_as_string(hide_password=True)}")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, wait_for_database)

    if settings.db_create_tables:
        init_database()

    logger.info(f"{ServerConfig.APP_NAME} ready")

    yield

    # Shutdown
    engine.dispose()
    logger.info("Application shutdown complete")


async def log_requests(request: Request, call_next):
    """Log the start and completion of every request with a request ID."""
    start = time.perf_counter()
    client_ip = request.client.host if request.client else None
    set_logging_context(request_id=uuid.uuid4().hex)

    request_logger.info(
        f"Request started: {request.method} {request.url.path}",
        extra={"client_ip": client_ip, "user_agent": request.headers.get("user-agent")},
    )
    try:
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000
        request_logger.info(
            f"Request completed: {request.method} {request.url.path} {response.status_code}",
            extra={"status": response.status_code, "latency_ms": round(latency_ms, 1), "client_ip": client_ip},
        )
        return response
    finally:
        clear_logging_context()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Undecodable or invalid request bodies are client errors (400)."""
    message = validation_error_message(exc.errors())
    logger.warning(f"{request.method} {request.url.path} - Invalid request: {message}")
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last resort for errors that escaped the route error handling."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"error": ErrorMessages.INTERNAL})


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Logging is configured first so that everything below can log.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=ServerConfig.APP_NAME,
        description="CRUD API for users with age derived from date of birth",
        version=ServerConfig.VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(users.router, tags=["users"])

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {ServerConfig.APP_NAME} on http://{settings.server_host}:{settings.server_port}...")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
