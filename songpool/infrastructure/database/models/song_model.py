"""
SQLAlchemy model for Song entity.
"""
from sqlalchemy import Column, String

from .base import BaseModel
from ....domain.entities.song import Song


class SongModel(BaseModel):
    """SQLAlchemy model for song table."""

    name = Column(String(255), nullable=False)
    artiste = Column(String(55), nullable=False)

    def to_domain(self) -> Song:
        """Convert ORM model to domain entity."""
        return Song(
            id=self.id,
            name=self.name,
            artiste=self.artiste,
            lifecycle=self.lifecycle_columns(),
        )

    @classmethod
    def from_domain(cls, song: Song) -> 'SongModel':
        """Create ORM model from domain entity."""
        return cls(
            id=song.id,
            name=song.name,
            artiste=song.artiste,
            lifecycle=song.lifecycle,
        )

    def update_from_domain(self, song: Song) -> None:
        """Update ORM model from domain entity."""
        self.name = song.name
        self.artiste = song.artiste
        if song.lifecycle.status:
            self.status = song.lifecycle.status
