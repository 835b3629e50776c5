import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
from fastapi import FastAPI, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.exceptions import QadsError, InvalidInput
from app.core.sessions import SessionRegistry
from app.dependencies import get_storage, get_sessions
from app.routers import admin, auth, dashboard, employee, event, onboarding, task
from app.schemas.common import ApiResponse
from app.schemas.health import HealthCheckResponse
from app.storage import Storage
from app.core.logging_config import logger


def create_app(
    storage: Optional[Storage] = None,
    sessions: Optional[SessionRegistry] = None
) -> FastAPI:
    """
    Build the API application.

    The store and the session registry are created once in the lifespan
    (or injected, e.g. by tests) and shared through ``app.state``.
    Failing to open the store aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_storage = storage is None
        try:
            app.state.storage = Storage.open(settings.DATABASE_URL) if owns_storage else storage
        except QadsError:
            logger.critical("Cannot start without durable storage, shutting down")
            raise
        app.state.sessions = sessions if sessions is not None else SessionRegistry()
        app.state.started_at = time.monotonic()
        logger.info(f"QADS API started (environment={settings.ENVIRONMENT})")
        yield
        if owns_storage:
            app.state.storage.close()
        logger.info("QADS API shutting down")

    app = FastAPI(
        title="QADS Business API",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        redirect_slashes=False  # Disable automatic redirects to prevent POST data loss
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    # Include routers
    app.include_router(onboarding.router, tags=["Onboarding"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
    app.include_router(employee.router, prefix="/api/employees", tags=["Employees"])
    app.include_router(task.router, prefix="/api/tasks", tags=["Tasks"])
    app.include_router(event.router, prefix="/api/events", tags=["Events"])
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])

    @app.get("/health", response_model=HealthCheckResponse)
    def health_check(
        request: Request,
        storage: Storage = Depends(get_storage),
        sessions: SessionRegistry = Depends(get_sessions)
    ):
        try:
            connected = storage.check_health()
        except QadsError as e:
            logger.error(f"Health check failed: {e.message}")
            connected = False
        return HealthCheckResponse(
            status="OK" if connected else "DEGRADED",
            version=settings.APP_VERSION,
            database_connected=connected,
            active_sessions=len(sessions),
            uptime=int(time.monotonic() - request.app.state.started_at),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    @app.exception_handler(QadsError)
    async def qads_error_handler(request: Request, exc: QadsError):
        """Translate domain and storage errors into the response envelope."""
        if exc.http_status >= 500:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        else:
            logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response(), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"Validation error on {request.url.path}: {errors}")
        if errors:
            first = errors[0]
            field = ".".join(str(loc) for loc in first["loc"] if loc != "body")
            message = f"{field}: {first['msg']}" if field else first["msg"]
        else:
            message = "Invalid request data"
        error = InvalidInput(message)
        return JSONResponse(status_code=error.http_status, content=error.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "Route not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiResponse.error(message).model_dump(),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; internal details are logged, never returned."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ApiResponse.error("Internal server error").model_dump(),
        )

    return app


app = create_app()
