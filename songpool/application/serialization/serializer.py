"""
Serializer: dispatches to an explicit, ordered list of normalizers.
"""
import json
import logging
from typing import Any, List, Mapping, Optional, Sequence

from .normalizers import JSON_FORMAT, LinkNormalizer, Normalizer, ObjectNormalizer
from .registry import ResourceRegistry, default_registry
from ..interfaces.routing import RouteResolver
from ...domain.exceptions import UnsupportedFormatError, UnsupportedTypeError

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool, type(None))


class Serializer:
    """
    Normalizes objects with the first normalizer whose predicate matches.

    Lists and tuples are normalized item by item, mappings value by value,
    scalars pass through unchanged. ``format`` is the marker this serializer
    encodes as JSON text, besides "json" itself.
    """

    def __init__(self, normalizers: Sequence[Normalizer], format: str = JSON_FORMAT):
        self._normalizers: List[Normalizer] = list(normalizers)
        self._format = format

    @property
    def format(self) -> str:
        return self._format

    @property
    def normalizers(self) -> List[Normalizer]:
        return list(self._normalizers)

    def find_normalizer(
        self,
        data: Any,
        format: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Normalizer]:
        for normalizer in self._normalizers:
            if normalizer.supports_normalization(data, format, context):
                return normalizer
        return None

    def normalize(
        self,
        data: Any,
        format: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Normalize ``data`` for ``format``.

        Raises:
            UnsupportedTypeError: If no normalizer accepts an object
        """
        if isinstance(data, _SCALARS):
            return data
        if isinstance(data, (list, tuple)):
            return [self.normalize(item, format, context) for item in data]
        if isinstance(data, Mapping):
            return {key: self.normalize(value, format, context) for key, value in data.items()}

        normalizer = self.find_normalizer(data, format, context)
        if normalizer is None:
            raise UnsupportedTypeError(type(data).__name__, format)
        return normalizer.normalize(data, format, context)

    def serialize(
        self,
        data: Any,
        format: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Normalize and encode ``data`` as JSON text.

        ``format`` defaults to the serializer's configured format.

        Raises:
            UnsupportedFormatError: If ``format`` is neither "json" nor the configured format
        """
        format = format or self._format
        if format not in (JSON_FORMAT, self._format):
            raise UnsupportedFormatError(format)
        return json.dumps(self.normalize(data, format, context))


def build_serializer(
    resolver: RouteResolver,
    registry: Optional[ResourceRegistry] = None,
    format: str = JSON_FORMAT,
    links_enabled: bool = True,
) -> Serializer:
    """
    Wire the application's serializer.

    The link normalizer comes first; anything it declines falls through to
    the generic object normalizer.
    """
    object_normalizer = ObjectNormalizer()
    normalizers: List[Normalizer] = []
    if links_enabled:
        normalizers.append(LinkNormalizer(
            normalizer=object_normalizer,
            resolver=resolver,
            registry=registry if registry is not None else default_registry(),
            format=format,
        ))
    normalizers.append(object_normalizer)
    logger.debug("Serializer built with %d normalizers", len(normalizers))
    return Serializer(normalizers, format=format)
