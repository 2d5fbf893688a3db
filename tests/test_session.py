import pytest

from premise.database import create_session_factory, get_db, get_db_context
from premise.database import session as session_module
from premise.repositories import EntityRepository
from sample_models import Widget


@pytest.fixture
def local_sessions(engine, monkeypatch):
    factory = create_session_factory(engine)
    monkeypatch.setattr(session_module, "SessionLocal", factory)
    return factory


def test_context_commits_on_success(local_sessions):
    with get_db_context() as db:
        EntityRepository(db, Widget).insert(Widget(name="kept"))

    with get_db_context() as db:
        assert [w.name for w in EntityRepository(db, Widget).get_all()] == ["kept"]


def test_context_rolls_back_and_reraises(local_sessions):
    with pytest.raises(RuntimeError):
        with get_db_context() as db:
            EntityRepository(db, Widget).insert(Widget(name="lost"))
            db.flush()
            raise RuntimeError("boom")

    with get_db_context() as db:
        assert EntityRepository(db, Widget).get_all().count() == 0


def test_get_db_yields_and_closes(local_sessions):
    sessions = get_db()
    db = next(sessions)
    EntityRepository(db, Widget).insert(Widget(name="uncommitted"))

    with pytest.raises(StopIteration):
        next(sessions)

    with get_db_context() as other:
        assert EntityRepository(other, Widget).get_all().count() == 0
