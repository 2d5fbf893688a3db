from __future__ import annotations

import os

# Keep the module-level engine in premise.database off the filesystem.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from sqlalchemy import event

from premise.database import create_all_tables, create_db_engine, create_session_factory, drop_all_tables


@pytest.fixture
def engine():
    import sample_models  # noqa: F401  registers tables on Base.metadata

    engine = create_db_engine("sqlite:///:memory:")
    create_all_tables(engine)
    yield engine
    drop_all_tables(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    db = create_session_factory(engine)()
    yield db
    db.rollback()
    db.close()


@pytest.fixture
def statements(engine):
    """SQL statements sent to the database while the test runs."""
    seen: list[str] = []

    def record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    yield seen
    event.remove(engine, "before_cursor_execute", record)
