"""
FastAPI dependency injection providers.

Registry, route resolver and serializer are built once from settings and
then shared read-only.
"""
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from ..application.interfaces.routing import RouteResolver
from ..application.serialization import (
    ResourceRegistry,
    Serializer,
    build_serializer,
    default_registry,
)
from ..config import get_settings
from ..infrastructure.database import get_db_session
from ..infrastructure.routing import build_route_table

# Singleton instances
_registry: Optional[ResourceRegistry] = None
_route_resolver: Optional[RouteResolver] = None
_serializer: Optional[Serializer] = None


def get_resource_registry() -> ResourceRegistry:
    """Get the registry of normalizable resources."""
    global _registry
    if _registry is None:
        _registry = default_registry()
    return _registry


def get_route_resolver() -> RouteResolver:
    """Get the route resolver (a table of the registered resources' routes)."""
    global _route_resolver
    if _route_resolver is None:
        _route_resolver = build_route_table(get_resource_registry(), get_settings())
    return _route_resolver


def set_route_resolver(resolver: RouteResolver) -> None:
    """Use another resolver, e.g. one backed by the web application's routes."""
    global _route_resolver, _serializer
    _route_resolver = resolver
    _serializer = None


def get_serializer() -> Serializer:
    """Get the application serializer."""
    global _serializer
    if _serializer is None:
        settings = get_settings()
        _serializer = build_serializer(
            resolver=get_route_resolver(),
            registry=get_resource_registry(),
            format=settings.serializer.format,
            links_enabled=settings.serializer.links_enabled,
        )
    return _serializer


def reset_dependencies() -> None:
    """Drop all singletons so they are rebuilt from current settings."""
    global _registry, _route_resolver, _serializer
    _registry = None
    _route_resolver = None
    _serializer = None


def get_db() -> Iterator[Session]:
    """Provide a database session for the request lifecycle."""
    with get_db_session() as session:
        yield session
