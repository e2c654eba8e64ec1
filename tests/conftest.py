import pytest
from fastapi.testclient import TestClient

from socialnet.database import CredentialStore
from socialnet.main import create_app


@pytest.fixture
def store():
    """An open, empty in-memory credential store."""
    store = CredentialStore("sqlite://")
    store.open()
    yield store
    store.close()


@pytest.fixture
def client(store):
    app = create_app(store)
    with TestClient(app) as client:
        yield client
