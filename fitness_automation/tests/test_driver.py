"""Tests for the async driver facade."""
import pytest

from fitness_automation.mobile.driver import (
    ElementNotFoundError,
    MobileDriver,
    MobileDriverError,
    WaitTimeoutError,
)
from fitness_automation.mobile.locators import accessibility_id

SUBMIT = accessibility_id("submit-button")


@pytest.mark.asyncio
async def test_find_raises_when_missing(driver):
    """Test lookup of an element that is not on screen."""
    with pytest.raises(ElementNotFoundError, match="No elements found for accessibility id:submit-button"):
        await driver.find(SUBMIT)


@pytest.mark.asyncio
async def test_find_index_out_of_range(driver, fake_client):
    """Test index lookups beyond the matches."""
    fake_client.add(SUBMIT)

    with pytest.raises(ElementNotFoundError, match="requested 1, found 1"):
        await driver.find(SUBMIT, index=1)


@pytest.mark.asyncio
async def test_set_value_clears_then_types(driver, fake_client):
    """Test that set_value replaces the existing value."""
    element = fake_client.add(SUBMIT, attributes={"value": "old"})

    await driver.set_value(SUBMIT, "new")

    assert element.attributes["value"] == "new"
    assert [action for action, _ in fake_client.calls] == ["clear", "send_keys"]


@pytest.mark.asyncio
async def test_wait_for_displayed_times_out(driver, fake_client):
    """Test that a hidden element makes the wait fail."""
    fake_client.add(SUBMIT, displayed=False)

    with pytest.raises(WaitTimeoutError, match="did not become displayed"):
        await driver.wait_for_displayed(SUBMIT)


@pytest.mark.asyncio
async def test_wait_for_displayed_reverse(driver, fake_client):
    """Test waiting for an element to go away."""
    await driver.wait_for_displayed(SUBMIT, reverse=True)

    fake_client.add(SUBMIT)
    with pytest.raises(WaitTimeoutError, match="did not hide"):
        await driver.wait_for_displayed(SUBMIT, reverse=True)


@pytest.mark.asyncio
async def test_wait_until_polls_until_true(fake_client):
    """Test that waits keep polling until the condition holds."""
    driver = MobileDriver(fake_client, poll_s=0.001, timeout_scale=1.0, pause_scale=0.0)
    attempts = []

    async def ready():
        attempts.append(1)
        return len(attempts) >= 3

    await driver.wait_until(ready, timeout_s=1.0, message="never ready")
    assert len(attempts) == 3


@pytest.mark.asyncio
async def test_wait_until_chains_last_driver_error(driver):
    """Test that the last lookup error is kept as the timeout's cause."""

    async def broken():
        raise MobileDriverError("lookup failed")

    with pytest.raises(WaitTimeoutError) as excinfo:
        await driver.wait_until(broken, timeout_s=1.0, message="gave up")
    assert str(excinfo.value.__cause__) == "lookup failed"


@pytest.mark.asyncio
async def test_wait_for_enabled_treats_missing_as_not_yet(driver, fake_client):
    """Test that a missing element times out instead of raising not-found."""
    with pytest.raises(WaitTimeoutError):
        await driver.wait_for_enabled(SUBMIT)

    fake_client.add(SUBMIT, enabled=True)
    await driver.wait_for_enabled(SUBMIT)


@pytest.mark.asyncio
async def test_scroll_into_view_uses_mobile_scroll(driver, fake_client):
    """Test the XCUITest scroll command payload."""
    element = fake_client.add(SUBMIT)

    await driver.scroll_into_view(SUBMIT)

    assert fake_client.scripts == [("mobile: scroll", ({"elementId": element.element_id, "toVisible": True},))]


@pytest.mark.asyncio
async def test_relaunch_app(driver, fake_client):
    """Test terminate then activate for the bundle id."""
    await driver.relaunch_app("com.xqfitness.app")

    assert [script for script, _ in fake_client.scripts] == ["mobile: terminateApp", "mobile: activateApp"]
    assert fake_client.scripts[0][1] == ({"bundleId": "com.xqfitness.app"},)


def test_driver_rejects_bad_scales(fake_client):
    """Test constructor validation."""
    with pytest.raises(ValueError):
        MobileDriver(fake_client, poll_s=0)
    with pytest.raises(ValueError):
        MobileDriver(fake_client, timeout_scale=-1)
