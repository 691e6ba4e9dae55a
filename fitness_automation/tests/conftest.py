import pytest

from fitness_automation.mobile.driver import MobileDriver
from fitness_automation.tests.fakes import FakeAppiumClient


@pytest.fixture
def fake_client() -> FakeAppiumClient:
    return FakeAppiumClient()


@pytest.fixture
def driver(fake_client: FakeAppiumClient) -> MobileDriver:
    """Driver with no pauses; every wait checks exactly once."""
    return MobileDriver(fake_client, poll_s=0.01, timeout_scale=0.0, pause_scale=0.0)
