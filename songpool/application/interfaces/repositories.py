"""
Repository interfaces (ports) for domain entities.

These interfaces define the contract for persistence operations
without specifying the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

# Generic type for entities
T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Defines common CRUD operations for all repositories. Implementations run
    the lifecycle hooks on insert and update.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """
        Get entity by ID.

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    def add(self, entity: T) -> T:
        """
        Add new entity.

        Returns:
            Added entity with generated ID and lifecycle metadata
        """
        pass

    @abstractmethod
    def update(self, entity: T) -> T:
        """Update existing entity."""
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        """
        Delete entity by ID.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    def list_all(self, limit: int = 100, offset: int = 0, status: Optional[str] = None) -> List[T]:
        """List entities with pagination, newest first."""
        pass
