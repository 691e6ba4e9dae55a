from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..artifacts import DOM_CAPTURES_DIR, ensure_dir, safe_stem, timestamp
from ..mobile.driver import MobileDriver, MobileDriverError, WaitTimeoutError
from ..mobile.locators import Locator


class ScreenVerificationError(AssertionError):
    """A screen did not show what the test expected."""


# Failures a best-effort UI step may swallow (optional fields, stray alerts).
UI_ERRORS = (MobileDriverError, ScreenVerificationError)


class Page:
    """
    Shared behaviour for every screen: page source capture and alert handling.

    Subclasses expose async actions that return `self` so they can be queued on
    a fluent proxy and drained with a single `await handle.execute()`.
    """

    def __init__(self, driver: MobileDriver, *, artifacts_dir: Optional[Path] = None) -> None:
        self.driver = driver
        self.artifacts_dir = artifacts_dir or Path("artifacts")

    async def _expect_displayed(self, locator: Locator, *, timeout_s: float = 5.0) -> None:
        try:
            await self.driver.wait_for_displayed(locator, timeout_s=timeout_s)
        except WaitTimeoutError as e:
            raise ScreenVerificationError(f"Expected {locator} to be displayed") from e

    async def _expect_enabled(self, locator: Locator, *, timeout_s: float = 2.0) -> None:
        try:
            await self.driver.wait_for_enabled(locator, timeout_s=timeout_s)
        except WaitTimeoutError as e:
            raise ScreenVerificationError(f"Expected {locator} to be enabled") from e

    async def _expect_any_displayed(self, *locators: Locator, timeout_s: float = 5.0) -> Locator:
        """Return the first locator that becomes displayed, trying each in turn."""
        for locator in locators:
            try:
                await self._expect_displayed(locator, timeout_s=timeout_s)
            except ScreenVerificationError:
                continue
            return locator
        raise ScreenVerificationError(
            "None of the expected elements were displayed: " + ", ".join(str(loc) for loc in locators)
        )

    async def _fill(self, locator: Locator, value: str, *, pause_s: float = 0.2) -> None:
        await self._expect_displayed(locator)
        await self._expect_enabled(locator)
        await self.driver.click(locator)
        await self.driver.pause(pause_s)
        await self.driver.set_value(locator, value)
        await self.driver.pause(pause_s)

    async def get_page_source(self) -> str:
        return await self.driver.get_page_source()

    async def capture_dom_tree(self, screen_name: str) -> Path:
        """Save the current page source as `dom-tree-<screen>-<timestamp>.xml`."""
        page_source = await self.get_page_source()
        out_dir = self.artifacts_dir / DOM_CAPTURES_DIR
        ensure_dir(out_dir)
        path = out_dir / f"dom-tree-{safe_stem(screen_name, fallback='screen')}-{timestamp()}.xml"
        path.write_text(page_source, encoding="utf-8")
        print(f"\nDOM tree captured: {path}")
        return path

    async def print_page_source(self) -> Page:
        page_source = await self.get_page_source()
        print("\n========== PAGE SOURCE (DOM TREE) ==========")
        print(page_source)
        print("============================================\n")
        return self

    async def accept_alert_if_present(self) -> Page:
        try:
            alert = await self.driver.get_alert_text()
        except MobileDriverError:
            return self
        if alert:
            print(f"Accepting alert: {alert}")
            await self.driver.accept_alert()
            await self.driver.pause(1.0)
        return self

    async def dismiss_alert_if_present(self) -> Page:
        try:
            alert = await self.driver.get_alert_text()
        except MobileDriverError:
            return self
        if alert:
            print(f"Dismissing alert: {alert}")
            await self.driver.dismiss_alert()
            await self.driver.pause(1.0)
        return self
