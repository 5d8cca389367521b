"""Storage and app fixtures shared by all tests."""
import pytest
from fastapi.testclient import TestClient

from filestore_api.adapters.storage import LocalStorage
from filestore_api.config.settings import Settings
from filestore_api.main import create_app


@pytest.fixture
def storage_dir(tmp_path):
    path = tmp_path / "storage"
    path.mkdir()
    return path


@pytest.fixture
def settings(storage_dir) -> Settings:
    return Settings(storage_dir=str(storage_dir))


@pytest.fixture
def storage(storage_dir) -> LocalStorage:
    return LocalStorage(storage_dir)


@pytest.fixture
def client(settings, storage):
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client
