import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from citas.core.config import Settings
from citas.core.database import Store
from citas.main import create_app

INDEX_HTML = b"<!DOCTYPE html><html><body><h1>Agendar cita</h1></body></html>"

@pytest.fixture
def test_settings(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_bytes(INDEX_HTML)
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'citas.db'}",
        STATIC_DIR=str(public),
    )

@pytest.fixture
def store(test_settings):
    store = Store.open(test_settings.DATABASE_URL)
    yield store
    store.close()

@pytest.fixture
def db_session(store):
    session = store.session()
    yield session
    session.close()

@pytest.fixture
def client(store, test_settings):
    with TestClient(create_app(store, test_settings), base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def count_citas(store):
    """Number of rows currently in the citas table."""
    def _count():
        with store.engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM citas")).scalar()
    return _count
