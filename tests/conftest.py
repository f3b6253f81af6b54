import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.models.employee import EmployeeModel
from app.store import EmployeeStore, SAMPLE_EMPLOYEES, get_store


@pytest.fixture
def store():
    return EmployeeStore(EmployeeModel(**data) for data in SAMPLE_EMPLOYEES)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: Settings(SIMULATED_DELAY_SECONDS=0)
    yield TestClient(app)
    app.dependency_overrides.clear()
