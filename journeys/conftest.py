"""
Fixtures for live journeys against a simulator, Appium and the fitness backend.

Journeys are skipped unless FITNESS_E2E=1. UI journeys get a fresh Appium
session with the app terminated; failed ones leave a page source and
screenshot under the artifacts dir. API journeys print a failure banner.
"""

import os
from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio

from fitness_automation.api import FitnessReadClient, FitnessWriteClient, RoutineTracker
from fitness_automation.hooks import capture_failure_artifacts, report_api_failure
from fitness_automation.mobile.driver import MobileDriver
from fitness_automation.session import open_driver
from fitness_automation.settings import SuiteSettings

E2E_ENV_FLAG = "FITNESS_E2E"


def pytest_collection_modifyitems(config, items):
    if os.environ.get(E2E_ENV_FLAG) == "1":
        return
    skip = pytest.mark.skip(reason=f"set {E2E_ENV_FLAG}=1 to run live journeys")
    for item in items:
        if "e2e" in item.keywords or "api" in item.keywords:
            item.add_marker(skip)


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def _call_report(node):
    return getattr(node, "rep_call", None)


@pytest.fixture(scope="session")
def settings() -> SuiteSettings:
    return SuiteSettings.from_env()


@pytest.fixture(scope="session")
def write_api(settings: SuiteSettings) -> FitnessWriteClient:
    return FitnessWriteClient(settings.write_service_url)


@pytest.fixture(scope="session")
def read_api(settings: SuiteSettings) -> FitnessReadClient:
    return FitnessReadClient(settings.read_service_url)


@pytest.fixture
def routines(write_api: FitnessWriteClient) -> Iterator[RoutineTracker]:
    """Routines created through the API; deleted after the test."""
    tracker = RoutineTracker(write_api)
    yield tracker
    tracker.cleanup()


@pytest_asyncio.fixture
async def driver(request, settings: SuiteSettings) -> AsyncIterator[MobileDriver]:
    """
    Fresh Appium session with the app terminated.

    Tests seed data first, then call `driver.activate_app(settings.bundle_id)`.
    """
    async with open_driver(settings) as mobile_driver:
        await mobile_driver.terminate_app(settings.bundle_id)
        yield mobile_driver

        report = _call_report(request.node)
        if report is not None and report.failed:
            await capture_failure_artifacts(mobile_driver, request.node.name, artifacts_dir=settings.artifacts_dir)


@pytest.fixture(autouse=True)
def api_failure_banner(request) -> Iterator[None]:
    yield
    if request.node.get_closest_marker("api") is None:
        return
    report = _call_report(request.node)
    if report is None:
        return
    debug = request.getfixturevalue("settings").debug
    report_api_failure(
        request.node.name,
        passed=report.passed,
        error=report.longreprtext if report.failed else None,
        duration_s=report.duration,
        debug=debug,
    )
