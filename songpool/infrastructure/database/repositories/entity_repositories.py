"""
Repositories for Pool, Song and User.
"""
from typing import Optional

from sqlalchemy import select

from .base_repository import SQLAlchemyRepository
from ..models import PoolModel, SongModel, UserModel
from ....domain.entities import Pool, Song, User


class SQLAlchemyPoolRepository(SQLAlchemyRepository[Pool]):
    model = PoolModel

    def get_by_code(self, code: str) -> Optional[Pool]:
        result = self._session.execute(select(PoolModel).where(PoolModel.code == code))
        model = result.scalar_one_or_none()
        return model.to_domain() if model else None


class SQLAlchemySongRepository(SQLAlchemyRepository[Song]):
    model = SongModel


class SQLAlchemyUserRepository(SQLAlchemyRepository[User]):
    model = UserModel

    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = self._session.execute(select(UserModel).where(UserModel.username == username))
        model = result.scalar_one_or_none()
        return model.to_domain() if model else None
