# Serialization
from .links import DEFAULT_LINKS, LinkBuilder, SELF_LINK, UP_LINK
from .naming import resource_name
from .normalizers import JSON_FORMAT, LinkNormalizer, Normalizer, ObjectNormalizer
from .registry import Resource, ResourceRegistry, default_registry
from .serializer import Serializer, build_serializer

__all__ = [
    'DEFAULT_LINKS',
    'LinkBuilder',
    'SELF_LINK',
    'UP_LINK',
    'resource_name',
    'JSON_FORMAT',
    'LinkNormalizer',
    'Normalizer',
    'ObjectNormalizer',
    'Resource',
    'ResourceRegistry',
    'default_registry',
    'Serializer',
    'build_serializer',
]
