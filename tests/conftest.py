import os

# Keep the module-level engine away from any real database file
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from library_catalog.database import Base, enable_sqlite_foreign_keys, get_db
from library_catalog.main import app, app_v1


@pytest.fixture
def engine():
    # One shared in-memory connection per test so every session sees the same data
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app_v1.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        app_v1.dependency_overrides.clear()


@pytest.fixture
def create_author(client):
    def _create(name="John Doe"):
        response = client.post("/api/v1/authors", json={"name": name})
        assert response.status_code == 201
        return response.json()
    return _create


@pytest.fixture
def create_book(client):
    def _create(author, title="Test Book", isbn="1234567890"):
        payload = {"title": title, "isbn": isbn, "author": {"id": author["id"], "name": author["name"]}}
        response = client.post("/api/v1/books", json=payload)
        assert response.status_code == 201
        return response.json()
    return _create
