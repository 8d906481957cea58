# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import auth_router, health_router, notes_router
from .config import Settings, get_settings
from .core.exceptions import QuirkNotesError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import Database

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the database on startup, close it on shutdown."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    logger.info(
        "Starting QuirkNotes application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    try:
        await database.connect()
        logger.info("Database tables created/verified")
    except Exception as e:
        logger.error("Failed to connect to the database", exc_info=e)
        raise

    yield

    logger.info("Shutting down QuirkNotes application")
    await database.close()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error to a JSON ``{"error": message}`` body."""

    @app.exception_handler(QuirkNotesError)
    async def quirknotes_error_handler(request: Request, exc: QuirkNotesError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"{request.method} {request.url.path} store failure", exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"{request.method} {request.url.path} unexpected failure", exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the FastAPI application around an explicitly constructed Database."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Personal notes API with JWT authentication",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.dependency_overrides[get_settings] = lambda: settings

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(notes_router)
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("quirknotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
