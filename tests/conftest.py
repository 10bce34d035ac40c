import pytest
from fastapi.testclient import TestClient

from pool_readings.server.app import create_app
from pool_readings.models import Measurement
from pool_readings.storage import AppendLogBackend, RelationalBackend, StorageBackend, StorageError


@pytest.fixture
def db_path(tmp_path) -> str:
    """Path to a fresh SQLite file for one test."""
    return str(tmp_path / "readings.db")


@pytest.fixture
def log_path(tmp_path) -> str:
    return str(tmp_path / "payloads.jsonl")


@pytest.fixture
def relational_backend(db_path):
    backend = RelationalBackend(db_path)
    backend.initialize()
    yield backend
    backend.close()


@pytest.fixture
def append_log_backend(log_path):
    backend = AppendLogBackend(log_path)
    backend.initialize()
    return backend


@pytest.fixture
def client(relational_backend):
    """Test client for an app backed by SQLite."""
    with TestClient(create_app(relational_backend)) as c:
        yield c


@pytest.fixture
def append_log_client(append_log_backend):
    with TestClient(create_app(append_log_backend)) as c:
        yield c


class FailingBackend(StorageBackend):
    """Backend whose every operation fails, as a broken disk or database would."""
    name = "failing"
    supports_listing = True

    def store(self, measurement: Measurement) -> None:
        raise StorageError("disk full at /var/lib/secret")

    def list_all(self):
        raise StorageError("table water_tests is corrupt")

    def count(self) -> int:
        return 0


@pytest.fixture
def failing_client():
    with TestClient(create_app(FailingBackend())) as c:
        yield c
