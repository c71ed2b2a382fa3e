import pytest
from fastapi.testclient import TestClient

from blogcore.api.deps import get_clock
from blogcore.api.main import app
from blogcore.db.database import get_db
from tests.conftest import FixedClock


@pytest.fixture
def client(db):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_clock] = lambda: FixedClock()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
