# Domain Exceptions
from .domain_exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
    RouteNotFoundError,
    MissingFieldError,
    UnsupportedTypeError,
    UnsupportedFormatError,
)

__all__ = [
    'DomainException',
    'EntityNotFoundException',
    'ValidationException',
    'RouteNotFoundError',
    'MissingFieldError',
    'UnsupportedTypeError',
    'UnsupportedFormatError',
]
