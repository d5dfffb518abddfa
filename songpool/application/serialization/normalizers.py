"""
Normalizers convert in-memory entities into wire-format mappings.

Each normalizer pairs a pure ``supports_normalization`` predicate with a
``normalize`` method; the Serializer asks them in order and uses the first
that accepts the data.
"""
import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from pydantic import TypeAdapter

from .registry import ResourceRegistry
from ..interfaces.routing import RouteResolver

logger = logging.getLogger(__name__)

JSON_FORMAT = "json"


class Normalizer(ABC):
    """Interface for a single normalization strategy."""

    @abstractmethod
    def supports_normalization(
        self,
        data: Any,
        format: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        """Return True if this normalizer handles ``data`` in ``format``."""
        pass

    @abstractmethod
    def normalize(
        self,
        data: Any,
        format: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Convert ``data`` into plain mappings, lists and scalars."""
        pass


class ObjectNormalizer(Normalizer):
    """
    Generic dataclass-to-mapping normalizer.

    Field order follows the dataclass definition. Values are dumped in
    pydantic's JSON mode, so datetimes and dates come out as ISO strings.
    The ``exclude`` context key removes top-level fields.
    """

    def __init__(self) -> None:
        self._adapters: Dict[type, TypeAdapter] = {}

    def _adapter(self, cls: type) -> TypeAdapter:
        adapter = self._adapters.get(cls)
        if adapter is None:
            adapter = TypeAdapter(cls)
            self._adapters[cls] = adapter
        return adapter

    def supports_normalization(self, data, format=None, context=None) -> bool:
        return dataclasses.is_dataclass(data) and not isinstance(data, type)

    def normalize(self, data, format=None, context=None) -> Dict[str, Any]:
        exclude = set((context or {}).get('exclude') or ()) or None
        return self._adapter(type(data)).dump_python(data, mode='json', exclude=exclude)


class LinkNormalizer(Normalizer):
    """
    Adds HATEOAS ``_links`` to registered resources.

    Applies only to the exact ``format`` token and to instances whose type is
    in the registry. The base mapping comes from the wrapped normalizer; the
    links from the resource's link builders, resolved through ``resolver``.
    """

    def __init__(
        self,
        normalizer: Normalizer,
        resolver: RouteResolver,
        registry: ResourceRegistry,
        format: str = JSON_FORMAT,
    ):
        self._normalizer = normalizer
        self._resolver = resolver
        self._registry = registry
        self._format = format

    def supports_normalization(self, data, format=None, context=None) -> bool:
        return format == self._format and self._registry.is_registered(data)

    def normalize(self, data, format=None, context=None) -> Dict[str, Any]:
        normalized = self._normalizer.normalize(data, format, context)
        resource = self._registry.get(type(data))

        # Built aside so a failing link leaves no partial _links behind
        links = {}
        for builder in resource.links:
            links[builder.rel] = builder.build(resource.token, normalized, self._resolver)

        logger.debug("Added %d links to %s", len(links), resource.token)
        normalized['_links'] = links
        return normalized
