# Imports for testing tools
import pytest
from fastapi.testclient import TestClient

# Import your application code
from tripbooking.main import app
from tripbooking.config import Settings
from tripbooking.database import get_storage
from tripbooking.storage import open_storage


# --- Storage Fixtures ---
@pytest.fixture(scope="function")
def storage():
    """Provides a freshly seeded in-memory database for each test."""
    gateway = open_storage(Settings(ENVIRONMENT="local"))
    yield gateway
    gateway.close()


# --- API Test Client Fixture ---
@pytest.fixture(scope="function")
def client(storage, mocker):
    """Provides a TestClient wired to the per-test storage."""
    # The lifespan would otherwise open the configured database file.
    mocker.patch("tripbooking.main.open_storage", return_value=storage)
    mocker.patch("tripbooking.main.get_local_ip", return_value="127.0.0.1")

    app.dependency_overrides[get_storage] = lambda: storage

    with TestClient(app) as c:
        yield c

    # Clean up overrides
    app.dependency_overrides.clear()
