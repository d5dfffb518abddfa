"""
Route resolvers: an in-memory named-route table and an adapter over a
FastAPI/Starlette application.
"""
import logging
import re
from typing import Any, Dict, Iterable, Mapping, Optional
from urllib.parse import quote, urlencode

from starlette.routing import NoMatchFound

from ...application.interfaces.routing import RouteResolver
from ...config import AppSettings, get_settings
from ...domain.exceptions import RouteNotFoundError

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r'\{(\w+)\}')


class RouteTable(RouteResolver):
    """
    Named route templates such as ``/api/v1/song/{id}``.

    Placeholders are filled from the params; params that match no
    placeholder are appended as a query string.
    """

    def __init__(self, routes: Optional[Mapping[str, str]] = None):
        self._routes: Dict[str, str] = dict(routes or {})

    def add(self, name: str, path: str) -> None:
        self._routes[name] = path

    def add_resource(self, token: str, collection_path: str) -> None:
        """Register the collection and single-item GET routes of a resource."""
        collection_path = collection_path.rstrip('/')
        self.add(f"api_get_all_{token}", collection_path)
        self.add(f"api_get_{token}", f"{collection_path}/{{id}}")

    def has_route(self, name: str) -> bool:
        return name in self._routes

    @property
    def names(self) -> Iterable[str]:
        return list(self._routes)

    def resolve(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        params = dict(params or {})
        try:
            template = self._routes[name]
        except KeyError:
            raise RouteNotFoundError(name, params) from None

        required = _PLACEHOLDER.findall(template)
        missing = [p for p in required if p not in params]
        if missing:
            raise RouteNotFoundError(
                name,
                params,
                message=f"Route '{name}' requires parameters: {', '.join(missing)}",
            )

        path = _PLACEHOLDER.sub(lambda m: quote(str(params[m.group(1)]), safe=''), template)
        extra = {k: v for k, v in params.items() if k not in required}
        if extra:
            path = f"{path}?{urlencode(extra)}"
        return path


class ApplicationRouteResolver(RouteResolver):
    """Resolves names against the routes of a FastAPI app or router."""

    def __init__(self, app: Any):
        self._app = app

    def has_route(self, name: str) -> bool:
        return any(getattr(route, 'name', None) == name for route in self._app.routes)

    def resolve(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        params = dict(params or {})
        try:
            return str(self._app.url_path_for(name, **params))
        except NoMatchFound:
            raise RouteNotFoundError(name, params) from None


def build_route_table(
    registry: Iterable[Any],
    settings: Optional[AppSettings] = None,
) -> RouteTable:
    """
    Route table with GET routes for every registered resource.

    Collection paths are ``<api_prefix>/<api_version>/<token>``.
    """
    settings = settings or get_settings()
    table = RouteTable()
    for resource in registry:
        table.add_resource(resource.token, f"{settings.api_base_path}/{resource.token}")
    logger.debug("Route table built with %d routes", len(list(table.names)))
    return table
