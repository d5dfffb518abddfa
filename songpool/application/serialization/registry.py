"""
Explicit registration table of normalizable resource types.

A registered type is on the link normalizer's allow-list; its entry carries
the resource token used in route names and the links built for it.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .links import DEFAULT_LINKS, LinkBuilder
from .naming import resource_name
from ...domain.exceptions import UnsupportedTypeError


@dataclass(frozen=True)
class Resource:
    """A registered resource type."""
    type: type
    token: str
    links: Tuple[LinkBuilder, ...] = DEFAULT_LINKS


class ResourceRegistry:
    """Maps entity types to their Resource entry (exact type identity)."""

    def __init__(self) -> None:
        self._resources: Dict[type, Resource] = {}

    def register(
        self,
        cls: type,
        token: Optional[str] = None,
        links: Optional[Iterable[LinkBuilder]] = None,
    ) -> Resource:
        """
        Register a type, replacing any previous entry for it.

        Args:
            cls: Entity class
            token: Resource token, derived from the class name if omitted
            links: Link builders, ``up`` and ``self`` if omitted
        """
        resource = Resource(
            type=cls,
            token=token or resource_name(cls.__name__),
            links=tuple(links) if links is not None else DEFAULT_LINKS,
        )
        self._resources[cls] = resource
        return resource

    def add_link(self, cls: type, builder: LinkBuilder) -> Resource:
        """Append (or replace, by rel) a link builder of a registered type."""
        resource = self.get(cls)
        links = tuple(link for link in resource.links if link.rel != builder.rel)
        return self.register(cls, token=resource.token, links=links + (builder,))

    def get(self, cls: type) -> Resource:
        try:
            return self._resources[cls]
        except KeyError:
            raise UnsupportedTypeError(cls.__name__) from None

    def token_for(self, cls: type) -> str:
        return self.get(cls).token

    def is_registered(self, obj: Any) -> bool:
        """True when the runtime type of ``obj`` is registered."""
        return type(obj) in self._resources

    def __contains__(self, cls: object) -> bool:
        return cls in self._resources

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)


def default_registry() -> ResourceRegistry:
    """Registry holding the application's Pool, Song and User resources."""
    from ...domain.entities import Pool, Song, User

    registry = ResourceRegistry()
    for cls in (Pool, Song, User):
        registry.register(cls)
    return registry
