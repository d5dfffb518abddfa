"""
Link builders: one per named entry in a representation's ``_links`` map.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ..interfaces.routing import RouteResolver
from ...domain.exceptions import MissingFieldError


@dataclass(frozen=True)
class LinkBuilder:
    """
    Describes one navigation link of a resource.

    ``route`` is a route-name template formatted with the resource token,
    ``params`` names the fields of the normalized data passed to the route.
    """
    rel: str
    route: str
    methods: Tuple[str, ...] = ("GET",)
    params: Tuple[str, ...] = ()

    def route_name(self, token: str) -> str:
        return self.route.format(token=token)

    def build(
        self,
        token: str,
        data: Mapping[str, Any],
        resolver: RouteResolver,
    ) -> Dict[str, Any]:
        """
        Build the ``{"method": [...], "path": ...}`` entry.

        Raises:
            MissingFieldError: A route parameter is absent (or None) in data
            RouteNotFoundError: The resolver does not know the route
        """
        route_params = {}
        for name in self.params:
            if data.get(name) is None:
                raise MissingFieldError(name, entity_type=token)
            route_params[name] = data[name]

        return {
            'method': list(self.methods),
            'path': resolver.resolve(self.route_name(token), route_params),
        }


UP_LINK = LinkBuilder(rel='up', route='api_get_all_{token}')
SELF_LINK = LinkBuilder(rel='self', route='api_get_{token}', params=('id',))

DEFAULT_LINKS: Tuple[LinkBuilder, ...] = (UP_LINK, SELF_LINK)
