"""
Database connection management.

Provides the SQLAlchemy engine and session management.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ...config import get_settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Manages database connections and sessions.

    The engine is created lazily from settings unless ``configure`` was
    called with an explicit URL.
    """

    _url: Optional[str] = None
    _engine: Optional[Engine] = None
    _session_factory: Optional[sessionmaker] = None

    @classmethod
    def configure(cls, url: Optional[str]) -> None:
        """Point the manager at another database, dropping the current engine."""
        cls.close()
        cls._url = url

    @classmethod
    def get_engine(cls) -> Engine:
        """Get or create the database engine."""
        if cls._engine is None:
            settings = get_settings()
            url = make_url(cls._url or settings.database.url)
            options = {}
            if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
                # One shared connection, or every thread sees its own empty database
                options = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
            cls._engine = create_engine(
                url,
                echo=settings.database.echo_sql,
                pool_pre_ping=True,  # Verify connections before use
                **options,
            )
        return cls._engine

    @classmethod
    def get_session_factory(cls) -> sessionmaker:
        """Get or create the session factory."""
        if cls._session_factory is None:
            cls._session_factory = sessionmaker(
                bind=cls.get_engine(),
                expire_on_commit=False,
                autoflush=False,
            )
        return cls._session_factory

    @classmethod
    def close(cls) -> None:
        """Close the database engine and all connections."""
        if cls._engine is not None:
            cls._engine.dispose()
            cls._engine = None
            cls._session_factory = None


@contextmanager
def get_db_session() -> Iterator[Session]:
    """
    Provide a transactional scope around a series of operations.

    Usage:
        with get_db_session() as session:
            session.add(model)
    """
    session = DatabaseManager.get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """
    Create all tables.

    Should be called on application startup.
    """
    from .models import Base

    Base.metadata.create_all(DatabaseManager.get_engine())
    logger.info("Database tables created")
