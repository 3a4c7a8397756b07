import pytest
from fastapi.testclient import TestClient

from step_counter_api.app.core.store import InMemoryTeamStore
from step_counter_api.app.main import create_app
from step_counter_api.app.services.team_service import TeamService


@pytest.fixture
def store():
    return InMemoryTeamStore()


@pytest.fixture
def service(store):
    return TeamService(store)


@pytest.fixture
def client(store):
    """Test client over a fresh application and an empty store."""
    with TestClient(create_app(store)) as c:
        yield c
