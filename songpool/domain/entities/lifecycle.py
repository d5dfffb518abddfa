"""
Lifecycle metadata embedded in every persisted entity, and the hooks the
persistence layer calls right before an insert or an update.
"""
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Optional

from ..exceptions import ValidationException

logger = logging.getLogger(__name__)

STATUS_ACTIVE = "active"
STATUS_MAX_LENGTH = 10


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LifecycleMetadata:
    """
    Creation/update timestamps and status of a persisted record (value object).

    Hooks never mutate an instance in place; they assign a new one to the
    owning entity's ``lifecycle`` attribute.
    """
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    status: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        return self.created_at is not None


def _current_lifecycle(entity: Any) -> LifecycleMetadata:
    # SQLAlchemy composites may come back as None for rows not yet loaded.
    return getattr(entity, 'lifecycle', None) or LifecycleMetadata()


def _as_utc(value: datetime) -> datetime:
    # Some backends (SQLite) hand timestamps back without tzinfo.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _validate_status(status: str) -> None:
    if len(status) > STATUS_MAX_LENGTH:
        raise ValidationException(
            message="Invalid lifecycle status",
            errors={'status': [f"Status cannot be longer than {STATUS_MAX_LENGTH} characters"]}
        )


def _latest(*values: Optional[datetime]) -> datetime:
    return max((v for v in values if v is not None), key=_as_utc)


def insert_defaults(current: LifecycleMetadata, now: Optional[datetime] = None) -> LifecycleMetadata:
    """
    Lifecycle of a record about to be inserted.

    created_at is kept when already set, updated_at is refreshed and an
    empty status becomes "active".
    """
    now = now or utc_now()

    created_at = current.created_at or now
    status = current.status or STATUS_ACTIVE
    _validate_status(status)

    return replace(
        current,
        created_at=created_at,
        updated_at=_latest(now, created_at),
        status=status,
    )


def update_defaults(current: LifecycleMetadata, now: Optional[datetime] = None) -> LifecycleMetadata:
    """
    Lifecycle of a stored record about to be updated.

    Only updated_at changes. It never moves backwards and never drops
    below created_at.
    """
    now = now or utc_now()

    if current.status:
        _validate_status(current.status)

    return replace(
        current,
        updated_at=_latest(now, current.updated_at, current.created_at),
    )


def apply_insert_defaults(entity: Any, now: Optional[datetime] = None) -> LifecycleMetadata:
    """
    Hook run immediately before an entity is first stored.

    Args:
        entity: Any object exposing a ``lifecycle`` attribute
        now: Timestamp to apply, defaults to the current UTC time

    Returns:
        The LifecycleMetadata assigned to the entity
    """
    lifecycle = insert_defaults(_current_lifecycle(entity), now)
    entity.lifecycle = lifecycle
    logger.debug("Insert defaults applied to %s", type(entity).__name__)
    return lifecycle


def apply_update_defaults(entity: Any, now: Optional[datetime] = None) -> LifecycleMetadata:
    """Hook run immediately before a stored entity is updated."""
    lifecycle = update_defaults(_current_lifecycle(entity), now)
    entity.lifecycle = lifecycle
    logger.debug("Update defaults applied to %s", type(entity).__name__)
    return lifecycle
