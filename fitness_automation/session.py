from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Optional

from .artifacts import ensure_dir, timestamp
from .mobile.appium_http_client import AppiumHTTPClient
from .mobile.config import load_capabilities
from .mobile.driver import MobileDriver
from .settings import SuiteSettings


@dataclass(frozen=True)
class SmokeCaptureResult:
    session_id: str
    screenshot_path: Path
    page_source_path: Path


@asynccontextmanager
async def open_driver(settings: SuiteSettings) -> AsyncIterator[MobileDriver]:
    """
    Start an Appium session for the app under test and tear it down afterwards.
    """
    capabilities_payload = load_capabilities(settings.capabilities_path)
    client = AppiumHTTPClient(settings.appium_server_url)
    await asyncio.to_thread(client.create_session, capabilities_payload)
    try:
        yield MobileDriver(
            client,
            timeout_scale=settings.timeout_scale,
            pause_scale=settings.pause_scale,
        )
    finally:
        await asyncio.to_thread(client.delete_session)


async def run_smoke_capture(
    settings: SuiteSettings,
    *,
    artifacts_dir: Optional[Path] = None,
    wait_for_enter_before_capture: bool = False,
) -> SmokeCaptureResult:
    """
    Create a session, save a screenshot and the XCUITest page source, then tear down.

    The quickest check that Appium, the simulator and the app's accessibility
    tree are all reachable before running journeys.
    """
    out_dir = artifacts_dir or settings.artifacts_dir
    ensure_dir(out_dir)

    async with open_driver(settings) as driver:
        if wait_for_enter_before_capture:
            await asyncio.to_thread(
                input,
                "\nAppium session started. Use the simulator now (navigate), then press Enter to capture...",
            )

        stamp = timestamp()
        screenshot_path = out_dir / f"mobile_screenshot_{stamp}.png"
        page_source_path = out_dir / f"mobile_page_source_{stamp}.xml"
        screenshot_path.write_bytes(await driver.take_screenshot())
        page_source_path.write_text(await driver.get_page_source(), encoding="utf-8")

        return SmokeCaptureResult(
            session_id=str(driver.client.session_id),
            screenshot_path=screenshot_path,
            page_source_path=page_source_path,
        )
