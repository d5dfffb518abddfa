"""
Song domain entity.
"""
from dataclasses import dataclass

from .base import Entity


@dataclass(kw_only=True, eq=False)
class Song(Entity):
    """A song and the artist performing it."""
    name: str
    artiste: str
