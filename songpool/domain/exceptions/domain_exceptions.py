"""
Domain Exceptions - Custom exceptions for domain-specific errors.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    All domain exceptions should inherit from this class to allow
    for consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class EntityNotFoundException(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(self, entity_type: str, entity_id: Optional[int] = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = f"{entity_type} not found"
        if entity_id is not None:
            msg = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(
            message=msg,
            code='ENTITY_NOT_FOUND',
            details={'entity_type': entity_type, 'entity_id': entity_id}
        )


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Can contain multiple validation errors for different fields.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, list]] = None
    ):
        self.errors = errors or {}
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            details={'validation_errors': self.errors}
        )

    def add_error(self, field: str, error: str) -> None:
        """Add a validation error for a specific field."""
        if field not in self.errors:
            self.errors[field] = []
        self.errors[field].append(error)
        self.details['validation_errors'] = self.errors


class RouteNotFoundError(DomainException):
    """Raised when a named route is absent from the route table."""

    def __init__(
        self,
        route_name: str,
        params: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None
    ):
        self.route_name = route_name
        self.params = dict(params or {})
        super().__init__(
            message=message or f"Route '{route_name}' does not exist",
            code='ROUTE_NOT_FOUND',
            details={
                'route_name': route_name,
                'params': {k: str(v) for k, v in self.params.items()}
            }
        )


class MissingFieldError(DomainException):
    """
    Raised when a normalized mapping lacks a field required to build links.

    Signals a misconfigured entity/serializer pairing rather than bad input.
    """

    def __init__(self, field_name: str, entity_type: Optional[str] = None):
        self.field_name = field_name
        self.entity_type = entity_type
        msg = f"Normalized data has no '{field_name}' field"
        if entity_type:
            msg = f"Normalized {entity_type} has no '{field_name}' field"
        super().__init__(
            message=msg,
            code='MISSING_FIELD',
            details={'field': field_name, 'entity_type': entity_type}
        )


class UnsupportedTypeError(DomainException):
    """Raised when no normalizer or registration exists for a type."""

    def __init__(self, type_name: str, format: Optional[str] = None):
        self.type_name = type_name
        self.format = format
        msg = f"Type '{type_name}' is not supported"
        if format:
            msg = f"Type '{type_name}' is not supported for format '{format}'"
        super().__init__(
            message=msg,
            code='UNSUPPORTED_TYPE',
            details={'type': type_name, 'format': format}
        )


class UnsupportedFormatError(DomainException):
    """Raised when serialization is requested in an unknown format."""

    def __init__(self, format: Optional[str]):
        self.format = format
        super().__init__(
            message=f"Serialization format '{format}' is not supported",
            code='UNSUPPORTED_FORMAT',
            details={'format': format}
        )
