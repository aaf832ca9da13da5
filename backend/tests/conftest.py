# tests/conftest.py
import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from moviesapi.db import Base, build_engine, get_db
from moviesapi.main import app
from moviesapi.models import Genre

engine = build_engine("sqlite://")
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    # Fresh schema for every test
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def genres(db_session):
    action = Genre(name="Action")
    drama = Genre(name="Drama")
    db_session.add_all([action, drama])
    db_session.commit()
    return {"action": action.id, "drama": drama.id}


@pytest.fixture(scope="function")
def client(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def create_movie(client):
    """Post a movie form; keyword arguments override the defaults"""
    def _create(poster=("poster.jpg", b"\xff\xd8\xff" + b"0" * 64, "image/jpeg"), **fields):
        data = {
            "title": "Inception",
            "storyLine": "A thief who steals corporate secrets through dream-sharing.",
            "year": "2010",
            "rate": "8.8",
        }
        data.update({key: str(value) for key, value in fields.items()})
        files = {"poster": poster} if poster is not None else None
        return client.post("/api/movies/", data=data, files=files)
    return _create
