# Domain Entities
from .lifecycle import (
    LifecycleMetadata,
    STATUS_ACTIVE,
    apply_insert_defaults,
    apply_update_defaults,
    insert_defaults,
    update_defaults,
    utc_now,
)
from .base import Entity
from .pool import Pool
from .song import Song
from .user import User

__all__ = [
    'LifecycleMetadata',
    'STATUS_ACTIVE',
    'apply_insert_defaults',
    'apply_update_defaults',
    'insert_defaults',
    'update_defaults',
    'utc_now',
    'Entity',
    'Pool',
    'Song',
    'User',
]
