"""
Database Session Management
============================

Handles database connections and session lifecycle.
"""

import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from premise.config import settings
from premise.core.logger import get_logger

logger = get_logger(__name__)


def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """Create and configure the database engine."""
    database_url = database_url or settings.database_url

    # SQLite-specific configuration
    if database_url.startswith("sqlite"):
        # Ensure data directory exists
        if ":///" in database_url:
            db_path = database_url.split(":///")[1]
            if not db_path.startswith(":memory:"):
                db_dir = os.path.dirname(db_path)
                if db_dir and not os.path.exists(db_dir):
                    os.makedirs(db_dir, exist_ok=True)

        # check_same_thread is off so the *_async repository methods can
        # run session calls on a worker thread
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.app_debug
        )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    else:
        engine = create_engine(database_url, echo=settings.app_debug)

    logger.debug("Created engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine_instance: Engine) -> sessionmaker:
    """Session factory with the change-tracking defaults repositories expect."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine_instance)


# Create global engine and session factory
engine = create_db_engine()
SessionLocal = create_session_factory(engine)


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Commits on success, rolls back and re-raises on any error.

    Usage:
        with get_db_context() as db:
            repo = EntityRepository(db, Invoice)
            repo.insert(invoice)
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        logger.exception("Rolling back database session")
        db.rollback()
        raise
    finally:
        db.close()


def get_db() -> Generator[Session, None, None]:
    """
    Session generator for dependency-injection frameworks.

    Usage:
        @app.get("/")
        def index(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_all_tables(engine_instance=None):
    """Create all tables in the database."""
    from premise.models.base import Base

    if engine_instance is None:
        engine_instance = engine

    Base.metadata.create_all(bind=engine_instance)


def drop_all_tables(engine_instance=None):
    """Drop all tables in the database."""
    from premise.models.base import Base

    if engine_instance is None:
        engine_instance = engine

    Base.metadata.drop_all(bind=engine_instance)
