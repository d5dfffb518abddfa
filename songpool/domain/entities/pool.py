"""
Pool domain entity.
"""
from dataclasses import dataclass

from .base import Entity


@dataclass(kw_only=True, eq=False)
class Pool(Entity):
    """A named, coded collection that songs are filed under."""
    name: str
    code: str
