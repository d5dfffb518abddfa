"""
Generic SQLAlchemy repository for models mapped with to_domain/from_domain.
"""
from typing import List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ....application.interfaces.repositories import Repository
from ..models.base import BaseModel

E = TypeVar('E')


class SQLAlchemyRepository(Repository[E]):
    """SQLAlchemy implementation of the base repository."""

    model: Type[BaseModel]

    def __init__(self, session: Session):
        self._session = session

    def _get_model(self, id: int) -> Optional[BaseModel]:
        return self._session.get(self.model, id)

    def get_by_id(self, id: int) -> Optional[E]:
        model = self._get_model(id)
        return model.to_domain() if model else None

    def add(self, entity: E) -> E:
        model = self.model.from_domain(entity)
        self._session.add(model)
        self._session.flush()
        return model.to_domain()

    def update(self, entity: E) -> E:
        model = self._get_model(entity.id)
        if model:
            model.update_from_domain(entity)
            self._session.flush()
            return model.to_domain()
        return entity

    def delete(self, id: int) -> bool:
        model = self._get_model(id)
        if model:
            self._session.delete(model)
            self._session.flush()
            return True
        return False

    def list_all(self, limit: int = 100, offset: int = 0, status: Optional[str] = None) -> List[E]:
        query = select(self.model)

        if status:
            query = query.where(self.model.status == status)

        query = query.order_by(self.model.created_at.desc(), self.model.id.desc())
        query = query.limit(limit).offset(offset)

        models = self._session.execute(query).scalars().all()
        return [m.to_domain() for m in models]

    def count(self, status: Optional[str] = None) -> int:
        query = select(func.count()).select_from(self.model)
        if status:
            query = query.where(self.model.status == status)
        return self._session.execute(query).scalar() or 0
