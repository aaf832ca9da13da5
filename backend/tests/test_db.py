# tests/test_db.py
from sqlalchemy import text
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from moviesapi.db import build_engine, get_db


def test_in_memory_engine_shares_one_connection():
    engine = build_engine("sqlite://")
    assert isinstance(engine.pool, StaticPool)

    with engine.begin() as connection:
        connection.execute(text("CREATE TABLE marker (id INTEGER)"))
    with engine.connect() as connection:
        assert connection.execute(text("SELECT count(*) FROM marker")).scalar() == 0


def test_file_engine_uses_regular_pool(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'movies.db'}")
    assert not isinstance(engine.pool, StaticPool)


def test_get_db_yields_session_and_closes_it():
    sessions = get_db()
    db = next(sessions)
    assert isinstance(db, Session)
    db.execute(text("SELECT 1"))
    assert db.in_transaction()

    sessions.close()
    assert not db.in_transaction()
