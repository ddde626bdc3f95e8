"""FastAPI application factory"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from collection_gateway.api.dependencies import get_request_id
from collection_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from collection_gateway.api.routes import appointments, collectors, debts, students
from collection_gateway.config import Settings, settings
from collection_gateway.domain.exceptions import EntityNotFoundError
from collection_gateway.infrastructure.database.repositories import build_sql_repositories
from collection_gateway.infrastructure.database.session import create_session_factory, session_scope
from collection_gateway.infrastructure.memory.repositories import build_memory_repositories
from collection_gateway.infrastructure.observability.logging import setup_logging
from collection_gateway.infrastructure.seed import seed_repositories
from collection_gateway.utils.clock import SystemClock

# Setup structured logging
setup_logging(settings.log_level)


def configure_storage(app: FastAPI, app_settings: Settings) -> None:
    """Attach in-memory repositories or a SQLAlchemy session factory to app state"""
    app.state.repositories = None
    app.state.session_factory = None

    if app_settings.storage_backend == "sqlalchemy":
        session_factory = create_session_factory(app_settings.database_url)
        if app_settings.seed_sample_data:
            with session_scope(session_factory) as db:
                repositories = build_sql_repositories(db)
                if not repositories.collectors.list():
                    seed_repositories(repositories)
        app.state.session_factory = session_factory
        return

    repositories = build_memory_repositories()
    if app_settings.seed_sample_data:
        seed_repositories(repositories)
    app.state.repositories = repositories


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app_settings = app_settings or settings

    app = FastAPI(
        title="Collection Gateway",
        description="Student debt tracking, interest accrual and collector scheduling",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.clock = SystemClock()
    configure_storage(app, app_settings)

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Malformed bodies answer 400 with the list of problems
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"errors": jsonable_encoder(exc.errors())})

    # Missing records answer 404 with "<Entity> not found"
    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logging.warning(
            f"{exc.entity} {exc.entity_id} not found", extra={"request_id": get_request_id(request)}
        )
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": app_settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(students.router, prefix="/api", tags=["students"])
    app.include_router(debts.router, prefix="/api", tags=["debts"])
    app.include_router(collectors.router, prefix="/api", tags=["collectors"])
    app.include_router(appointments.router, prefix="/api", tags=["appointments"])

    return app


app = create_app()
