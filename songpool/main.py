"""
FastAPI application entry point.

Serves the registered resources read-only and resolves their ``_links``
against the application's own routes.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.dependencies import get_resource_registry, set_route_resolver
from .api.resources import build_resource_router
from .config import AppSettings, get_settings
from .domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    RouteNotFoundError,
    ValidationException,
)
from .infrastructure.database.connection import DatabaseManager, init_db
from .infrastructure.routing import ApplicationRouteResolver
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Create tables on startup, release the engine on shutdown."""
    init_db()
    logger.info("Database initialized")

    yield

    DatabaseManager.close()
    logger.info("Shutdown complete")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Application factory.

    Configures logging, mounts the resource routes under the API base path
    and makes the serializer resolve links through this application.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(
        build_resource_router(get_resource_registry()),
        prefix=settings.api_base_path,
    )
    set_route_resolver(ApplicationRouteResolver(app))

    logger.info("Starting %s v%s (%s)", settings.app_name, settings.app_version, settings.environment)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exc.to_dict(),
        )

    @app.exception_handler(EntityNotFoundException)
    async def not_found_handler(request: Request, exc: EntityNotFoundException):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=exc.to_dict(),
        )

    @app.exception_handler(ValidationException)
    async def validation_handler(request: Request, exc: ValidationException):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=exc.to_dict(),
        )

    @app.exception_handler(RouteNotFoundError)
    async def route_not_found_handler(request: Request, exc: RouteNotFoundError):
        logger.error("Link generation failed: %s", exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=exc.to_dict(),
        )
