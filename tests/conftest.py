"""
Shared pytest fixtures.

Provides fixtures for:
- Route tables and the resource registry
- The application serializer
- Database sessions (in-memory SQLite)
- Fixed timestamps for lifecycle hooks
"""
import os
from datetime import datetime, timedelta, timezone

import pytest

# Test environment configuration
os.environ.setdefault("ENVIRONMENT", "test")

from songpool.application.serialization import ResourceRegistry, build_serializer
from songpool.domain.entities import Pool, Song, User
from songpool.infrastructure.routing import RouteTable


# ============================================================================
# Time Fixtures
# ============================================================================

@pytest.fixture
def t0() -> datetime:
    """A fixed, timezone-aware reference time."""
    return datetime(2025, 6, 11, 8, 27, 10, tzinfo=timezone.utc)


@pytest.fixture
def t1(t0) -> datetime:
    """One hour after t0."""
    return t0 + timedelta(hours=1)


# ============================================================================
# Serialization Fixtures
# ============================================================================

@pytest.fixture
def registry() -> ResourceRegistry:
    """Registry with the application's three resources."""
    registry = ResourceRegistry()
    for cls in (Pool, Song, User):
        registry.register(cls)
    return registry


@pytest.fixture
def route_table() -> RouteTable:
    """Route table using plural collection paths."""
    table = RouteTable()
    table.add_resource("song", "/api/songs")
    table.add_resource("pool", "/api/pools")
    table.add_resource("user", "/api/users")
    return table


@pytest.fixture
def serializer(route_table, registry):
    """Serializer with the link normalizer in front of the object normalizer."""
    return build_serializer(resolver=route_table, registry=registry)


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def db_session():
    """
    Session bound to a fresh in-memory SQLite database.

    Tables are created before the test and the engine disposed after.
    """
    from songpool.infrastructure.database import DatabaseManager, init_db

    DatabaseManager.configure("sqlite://")
    init_db()
    session = DatabaseManager.get_session_factory()()
    try:
        yield session
    finally:
        session.close()
        DatabaseManager.configure(None)
