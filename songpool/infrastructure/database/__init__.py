# Database infrastructure
from .connection import DatabaseManager, get_db_session, init_db

__all__ = ['DatabaseManager', 'get_db_session', 'init_db']
