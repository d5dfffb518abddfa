"""
Base class for persisted domain entities.
These are pure Python classes with no external dependencies.
"""
from dataclasses import dataclass, field
from typing import Optional

from .lifecycle import LifecycleMetadata, utc_now

__all__ = ['Entity', 'utc_now']


@dataclass(kw_only=True)
class Entity:
    """
    Base class for all entities.

    Entities are identified by their ID, assigned by the database on
    first insert. Every entity embeds its LifecycleMetadata by value.
    """
    id: Optional[int] = None
    lifecycle: LifecycleMetadata = field(default_factory=LifecycleMetadata)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((type(self).__name__, self.id))

    @property
    def status(self) -> Optional[str]:
        return self.lifecycle.status
