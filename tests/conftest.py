import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture
def client():
    # Entering the client runs startup, which builds a fresh session store.
    with TestClient(app) as test_client:
        yield test_client
