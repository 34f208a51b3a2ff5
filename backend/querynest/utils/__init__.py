"""Utility modules"""

from .database import get_db, create_db_engine, create_session_factory, init_db

__all__ = ["get_db", "create_db_engine", "create_session_factory", "init_db"]
