"""
Test bootstrap:
- Make the shared ``helpers`` package importable
- Provide a Help Scout client wired to a recording fake session
"""
import sys
import pathlib
import pytest

TESTS_DIR = pathlib.Path(__file__).parent

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers import FakeSession  # noqa: E402

from helpscout_client import HelpScout, ApiClient, ClientConfig  # noqa: E402


@pytest.fixture
def fake_session():
    """Provide a fake requests.Session that records calls."""
    return FakeSession()


@pytest.fixture
def api_client(fake_session):
    """Provide an ApiClient using the fake session."""
    return ApiClient(ClientConfig(access_token="test-token"), session=fake_session)


@pytest.fixture
def client(fake_session):
    """Provide a HelpScout facade using the fake session."""
    return HelpScout(access_token="test-token", session=fake_session)
