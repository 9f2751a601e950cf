"""
Database connection and session management

Host applications use get_db() as their session dependency; translations never commit on their own.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from translatable.core.config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared between threads by the session pool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {"connect_timeout": 10}


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Generator yielding a database session.
    Closes the session once the caller is done with it.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
