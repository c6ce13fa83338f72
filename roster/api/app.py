"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, store lifecycle and route registration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roster import __version__
from roster.api.dependencies import open_student_store
from roster.api.exceptions import RosterAPIError
from roster.api.middleware.context import RequestContextMiddleware
from roster.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from roster.api.routes import register_routes
from roster.config import get_settings
from roster.observability.logging import configure_from, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the student store on startup and close its connection on shutdown."""
    store, handle = await open_student_store(get_settings())
    app.state.student_store = store
    try:
        yield
    finally:
        if handle is not None:
            await handle.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a fully configured FastAPI app with:
    - Structured logging from settings
    - CORS middleware
    - Request context middleware
    - Global exception handlers
    - All API routes registered

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    configure_from(settings.observability.logging)

    app = FastAPI(
        title="Roster API",
        description="Student records backed by Redis hashes, with CSV bulk import",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)
    register_routes(app, settings.observability.metrics)

    logger.info(
        "app_created",
        debug=settings.debug,
        storage_backend=settings.storage.backend,
        atomic_imports=settings.imports.atomic,
    )

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(RosterAPIError)
    async def roster_api_error_handler(
        request: Request, exc: RosterAPIError
    ) -> JSONResponse:
        """Handle RosterAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )

        error_body = ErrorBody(
            code=exc.error_code,
            message=exc.message,
            details=exc.details,
            line=getattr(exc, "line", None),
            rows_committed=getattr(exc, "rows_committed", None),
        )
        response = ErrorResponse(error=error_body)

        return JSONResponse(
            status_code=exc.status_code,
            content=response.model_dump(exclude_none=True),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors as 400."""
        logger.warning(
            "validation_error",
            errors=exc.errors(),
            path=request.url.path,
        )

        details = []
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            details.append(ErrorDetail(field=field, message=error["msg"]))

        error_body = ErrorBody(
            code=ErrorCode.INVALID_REQUEST,
            message="Request validation failed",
            details=details,
        )
        response = ErrorResponse(error=error_body)

        return JSONResponse(
            status_code=400,
            content=response.model_dump(exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )

        error_body = ErrorBody(
            code=ErrorCode.INTERNAL_ERROR,
            message="An unexpected error occurred",
        )
        response = ErrorResponse(error=error_body)

        return JSONResponse(
            status_code=500,
            content=response.model_dump(exclude_none=True),
        )

    logger.debug("exception_handlers_registered")


# Create the app instance for uvicorn
app = create_app()
