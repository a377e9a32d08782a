"""
Pytest configuration and shared fixtures.

The fixtures build isolated applications: no sample data, a small
fixed set of memberships and a fake directory client in place of the
real Super App.
"""
import pytest
from fastapi.testclient import TestClient

from ku_research_api.app.core.config import Settings
from ku_research_api.app.core.membership import MembershipIndex
from ku_research_api.app.core.store import PaperStore
from ku_research_api.app.main import create_app
from tests.factories import FakeDirectory


@pytest.fixture
def test_settings():
    return Settings(
        project_name="Ku Research",
        log_level="WARNING",
        log_file="",
        service_url="http://ku-research.test:8083",
        registration_max_attempts=5,
        registration_retry_interval=2.0,
        site_members="5",
        workspace_members="7:2,7:4",
        seed_sample_papers=False,
        sample_owner_id=0,
    )


@pytest.fixture
def memberships():
    return MembershipIndex(workspace_members=[(7, 2), (7, 4), (8, 3)], site_members=[5, 6])


@pytest.fixture
def store():
    return PaperStore()


@pytest.fixture
def directory():
    return FakeDirectory()


@pytest.fixture
def app(test_settings, directory):
    return create_app(test_settings, directory_client=directory)


@pytest.fixture
def client(app):
    return TestClient(app)
