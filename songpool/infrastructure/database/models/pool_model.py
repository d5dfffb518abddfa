"""
SQLAlchemy model for Pool entity.
"""
from sqlalchemy import Column, String

from .base import BaseModel
from ....domain.entities.pool import Pool


class PoolModel(BaseModel):
    """SQLAlchemy model for pool table."""

    name = Column(String(255), nullable=False)
    code = Column(String(255), nullable=False)

    def to_domain(self) -> Pool:
        """Convert ORM model to domain entity."""
        return Pool(
            id=self.id,
            name=self.name,
            code=self.code,
            lifecycle=self.lifecycle_columns(),
        )

    @classmethod
    def from_domain(cls, pool: Pool) -> 'PoolModel':
        """Create ORM model from domain entity."""
        return cls(
            id=pool.id,
            name=pool.name,
            code=pool.code,
            lifecycle=pool.lifecycle,
        )

    def update_from_domain(self, pool: Pool) -> None:
        """Update ORM model from domain entity."""
        self.name = pool.name
        self.code = pool.code
        if pool.lifecycle.status:
            self.status = pool.lifecycle.status
