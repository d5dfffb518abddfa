"""
Read-only resource endpoints.

Each registered resource gets a collection route named
``api_get_all_<token>`` and an item route named ``api_get_<token>``, the
names the link normalizer resolves against the application.
"""
import logging
from typing import Dict, Optional, Type

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .dependencies import get_db, get_serializer
from ..application.serialization import Resource, ResourceRegistry, Serializer
from ..domain.entities import Pool, Song, User
from ..domain.exceptions import EntityNotFoundException
from ..infrastructure.database.repositories import (
    SQLAlchemyPoolRepository,
    SQLAlchemyRepository,
    SQLAlchemySongRepository,
    SQLAlchemyUserRepository,
)

logger = logging.getLogger(__name__)

REPOSITORIES: Dict[type, Type[SQLAlchemyRepository]] = {
    Pool: SQLAlchemyPoolRepository,
    Song: SQLAlchemySongRepository,
    User: SQLAlchemyUserRepository,
}


def _list_endpoint(repository_cls: Type[SQLAlchemyRepository]):
    def list_resources(
        limit: int = Query(100, ge=1, le=500),
        offset: int = Query(0, ge=0),
        status_filter: Optional[str] = Query(None, alias="status"),
        session: Session = Depends(get_db),
        serializer: Serializer = Depends(get_serializer),
    ):
        items = repository_cls(session).list_all(limit=limit, offset=offset, status=status_filter)
        return serializer.normalize(items, serializer.format)

    return list_resources


def _get_endpoint(repository_cls: Type[SQLAlchemyRepository], resource: Resource):
    def get_resource(
        id: int,
        session: Session = Depends(get_db),
        serializer: Serializer = Depends(get_serializer),
    ):
        item = repository_cls(session).get_by_id(id)
        if item is None:
            raise EntityNotFoundException(resource.type.__name__, id)
        return serializer.normalize(item, serializer.format)

    return get_resource


def build_resource_router(registry: ResourceRegistry) -> APIRouter:
    """Router with the GET routes of every registered resource that has a repository."""
    router = APIRouter()

    for resource in registry:
        repository_cls = REPOSITORIES.get(resource.type)
        if repository_cls is None:
            logger.warning("No repository for %s, routes not registered", resource.type.__name__)
            continue

        router.add_api_route(
            f"/{resource.token}",
            _list_endpoint(repository_cls),
            methods=["GET"],
            name=f"api_get_all_{resource.token}",
            tags=[resource.token],
        )
        router.add_api_route(
            f"/{resource.token}/{{id}}",
            _get_endpoint(repository_cls, resource),
            methods=["GET"],
            name=f"api_get_{resource.token}",
            tags=[resource.token],
        )

    return router
