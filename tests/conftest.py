import pytest
from fastapi.testclient import TestClient

from user_registry_api.app.core.store import UserStore
from user_registry_api.app.main import create_app


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def juan():
    """A valid user payload."""
    return {"name": "Juan Perez", "email": "juan@example.com", "age": 30}
