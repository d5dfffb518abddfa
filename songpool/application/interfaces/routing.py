"""
Routing interfaces (ports).

The serializer only needs to turn a route name and parameters into a path;
the concrete route table lives in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class RouteResolver(ABC):
    """Interface for named-route path generation."""

    @abstractmethod
    def resolve(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Generate the path of a named route.

        Raises:
            RouteNotFoundError: If no route with that name is registered
        """
        pass

    @abstractmethod
    def has_route(self, name: str) -> bool:
        """Check whether a route name is known."""
        pass
