"""
SQLAlchemy model for User entity.
"""
from sqlalchemy import Column, Date, Integer, JSON, String, UniqueConstraint

from .base import BaseModel
from ....domain.entities.user import User


class UserModel(BaseModel):
    """SQLAlchemy model for user table."""

    __table_args__ = (UniqueConstraint('username'),)

    # Profile
    username = Column(String(180), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(180), nullable=True)

    # Progression
    level = Column(Integer, default=1, nullable=False)
    total_points = Column(Integer, default=0, nullable=False)
    current_streak = Column(Integer, default=0, nullable=False)
    longest_streak = Column(Integer, default=0, nullable=False)
    last_activity_date = Column(Date, nullable=True)

    # Settings
    unit_system = Column(String(10), default='metric', nullable=True)
    locale = Column(String(10), default='fr', nullable=True)
    preferences = Column(JSON, nullable=True)

    def to_domain(self) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=self.id,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            level=self.level,
            total_points=self.total_points,
            current_streak=self.current_streak,
            longest_streak=self.longest_streak,
            last_activity_date=self.last_activity_date,
            unit_system=self.unit_system or 'metric',
            locale=self.locale or 'fr',
            preferences=self.preferences,
            lifecycle=self.lifecycle_columns(),
        )

    @classmethod
    def from_domain(cls, user: User) -> 'UserModel':
        """Create ORM model from domain entity."""
        model = cls(id=user.id, lifecycle=user.lifecycle)
        model.update_from_domain(user)
        return model

    def update_from_domain(self, user: User) -> None:
        """Update ORM model from domain entity."""
        self.username = user.username
        self.first_name = user.first_name
        self.last_name = user.last_name
        self.email = user.email
        self.level = user.level
        self.total_points = user.total_points
        self.current_streak = user.current_streak
        self.longest_streak = user.longest_streak
        self.last_activity_date = user.last_activity_date
        self.unit_system = user.unit_system
        self.locale = user.locale
        self.preferences = user.preferences
        if user.lifecycle.status:
            self.status = user.lifecycle.status
