"""
SQLAlchemy base model and common mixins.
"""
from datetime import timezone

from sqlalchemy import Column, DateTime, Integer, MetaData, String, event
from sqlalchemy.orm import DeclarativeBase, composite, declared_attr
from sqlalchemy.types import TypeDecorator

from ....application.serialization.naming import resource_name
from ....domain.entities.lifecycle import (
    STATUS_MAX_LENGTH,
    LifecycleMetadata,
    insert_defaults,
    update_defaults,
)

# Naming convention for database constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp stored in UTC.

    Backends without timezone support (SQLite) return naive values; those
    are read back as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    @declared_attr.directive
    def __tablename__(cls) -> str:
        """Generate table name from class name (SongModel -> song)."""
        return resource_name(cls.__name__.removesuffix('Model'))


class IntegerIdMixin:
    """Mixin that adds an autoincrement integer primary key."""

    id = Column(Integer, primary_key=True, autoincrement=True)


class LifecycleMixin:
    """
    Mixin that adds created_at, updated_at and status columns, exposed
    together as the ``lifecycle`` composite.
    """

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
    status = Column(String(STATUS_MAX_LENGTH), nullable=False)

    @declared_attr
    def lifecycle(cls):
        return composite(LifecycleMetadata, 'created_at', 'updated_at', 'status')

    def lifecycle_columns(self) -> LifecycleMetadata:
        """Lifecycle read from the column attributes, bypassing the composite cache."""
        return LifecycleMetadata(
            created_at=self.created_at,
            updated_at=self.updated_at,
            status=self.status,
        )


def _before_insert(mapper, connection, target) -> None:
    target.lifecycle = insert_defaults(target.lifecycle_columns())


def _before_update(mapper, connection, target) -> None:
    # Only updated_at is written; the composite may still hold values
    # that predate direct column assignments.
    target.updated_at = update_defaults(target.lifecycle_columns()).updated_at


_registered: set = set()


def register_lifecycle_listeners(target: type = LifecycleMixin) -> None:
    """
    Run the lifecycle hooks on every flush of ``target`` and its subclasses.

    Safe to call more than once.
    """
    if target in _registered:
        return
    event.listen(target, "before_insert", _before_insert, propagate=True)
    event.listen(target, "before_update", _before_update, propagate=True)
    _registered.add(target)


class BaseModel(Base, IntegerIdMixin, LifecycleMixin):
    """
    Abstract base model with common fields.

    Includes: id (integer), created_at, updated_at, status
    """
    __abstract__ = True
