# SQLAlchemy Repositories
from .base_repository import SQLAlchemyRepository
from .entity_repositories import (
    SQLAlchemyPoolRepository,
    SQLAlchemySongRepository,
    SQLAlchemyUserRepository,
)

__all__ = [
    'SQLAlchemyRepository',
    'SQLAlchemyPoolRepository',
    'SQLAlchemySongRepository',
    'SQLAlchemyUserRepository',
]
