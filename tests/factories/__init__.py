"""
Test data factories.

Provides factory classes for generating domain entities.
"""
from .entity_factory import PoolFactory, SongFactory, UserFactory

__all__ = [
    "PoolFactory",
    "SongFactory",
    "UserFactory",
]
