def test_root_lists_versions(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["versions"] == {"v1": "/api/v1/docs"}


def test_health_reports_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert "timestamp" in body


def test_unknown_route_is_404(client):
    assert client.get("/api/v1/publishers").status_code == 404


class BrokenSession:
    def execute(self, *args, **kwargs):
        raise RuntimeError("database is down")

    def close(self):
        pass


def test_health_reports_database_errors(client):
    from library_catalog.database import get_db
    from library_catalog.main import app

    def broken_db():
        yield BrokenSession()

    app.dependency_overrides[get_db] = broken_db

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "error: database is down"


def test_startup_creates_missing_tables(monkeypatch):
    from fastapi.testclient import TestClient
    from sqlalchemy import create_engine, inspect
    from sqlalchemy.pool import StaticPool

    import library_catalog.main as main_module

    empty_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(main_module, "engine", empty_engine)

    with TestClient(main_module.app):
        tables = set(inspect(empty_engine).get_table_names())

    assert {"authors", "books"} <= tables
