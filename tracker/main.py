"""
Task Tracker API - Main Application

Multi-user task tracking: registration, JWT login, and task/user resources
with optimistic-concurrency updates.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from tracker.auth.errors import AuthError
from tracker.auth.router import router as auth_router
from tracker.config import settings
from tracker.database import database
from tracker.logging_setup import setup_logging
from tracker.mutation import ConcurrencyConflictError
from tracker.security import validate_security_config
from tracker.tasks.router import router as tasks_router
from tracker.users.router import router as users_router

setup_logging(
    level=settings.LOG_LEVEL,
    log_file=settings.LOG_FILE,
    backup_count=settings.LOG_FILE_BACKUP_COUNT,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."
INVALID_REQUEST_MESSAGE = "Request data is invalid."
LOGIN_PATH = "/auth/login"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: refuse to run without a signing key
    validate_security_config()
    logger.info("Starting up %s %s", settings.APP_NAME, settings.APP_VERSION)
    await database.connect()
    await database.ensure_indexes()

    yield

    await database.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Multi-user task tracking API",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing input is a 400; on login it is an ordinary failed login."""
    fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    logger.warning(
        "Invalid request data on %s %s: %s",
        request.method, request.url.path, ", ".join(fields),
    )
    if request.url.path == LOGIN_PATH:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": AuthError.INVALID_CREDENTIALS.message},
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_REQUEST_MESSAGE, "fields": fields},
    )


@app.exception_handler(ConcurrencyConflictError)
async def concurrency_conflict_handler(request: Request, exc: ConcurrencyConflictError) -> JSONResponse:
    """Unresolvable lost-update conflict; the client must re-read and resubmit."""
    logger.error(
        "Unresolved concurrency conflict on %s %s: %s",
        request.method, request.url.path, exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


@app.exception_handler(PyMongoError)
async def persistence_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(
        "Persistence failure on %s %s",
        request.method, request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


app.include_router(auth_router)
app.include_router(tasks_router)
app.include_router(users_router)


def run() -> None:
    """Serve the application with uvicorn using HOST/PORT from settings."""
    import uvicorn

    uvicorn.run(
        "tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
