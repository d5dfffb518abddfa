# SQLAlchemy Models
from .base import (
    Base,
    BaseModel,
    IntegerIdMixin,
    LifecycleMixin,
    register_lifecycle_listeners,
)
from .pool_model import PoolModel
from .song_model import SongModel
from .user_model import UserModel

register_lifecycle_listeners()

__all__ = [
    'Base',
    'BaseModel',
    'IntegerIdMixin',
    'LifecycleMixin',
    'register_lifecycle_listeners',
    'PoolModel',
    'SongModel',
    'UserModel',
]
