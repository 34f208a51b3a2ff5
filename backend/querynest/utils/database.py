"""Database engine construction and session management"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from ..models.base import Base


def create_db_engine(database_url: str) -> Engine:
    """
    Create the database engine

    Pool sizing only applies to server databases; SQLite URLs get a
    thread-shareable connection instead.
    """

    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False}
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``"""

    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI

    Uses the session factory created during application startup and
    ensures the session is closed after use.
    """

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """
    Initialize database tables

    Creates all tables defined in models.
    """

    # Import all models to ensure they're registered
    from ..models import Query, Recommendation, Favorite  # noqa: F401

    Base.metadata.create_all(bind=engine)
