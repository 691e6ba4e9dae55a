"""
Post-test diagnostics wired into pytest by `journeys/conftest.py`.

UI journeys capture the page source and a screenshot when they fail so that
broken locators can be fixed from the artifacts ("healing" capture). API-only
tests print a failure banner instead, and report durations when DEBUG is on.
"""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import Optional

from .artifacts import CaptureResult, capture_page_source_and_screenshot
from .mobile.driver import MobileDriver

_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize_test_name(title: Optional[str]) -> str:
    sanitized = _UNSAFE.sub("", _WHITESPACE.sub("-", title or "failed"))
    return sanitized or f"failed-{int(time.time() * 1000)}"


async def capture_failure_artifacts(
    driver: MobileDriver,
    test_name: str,
    *,
    artifacts_dir: Path,
) -> Optional[CaptureResult]:
    prefix = sanitize_test_name(test_name)
    print("\n========== HEALING MECHANISM: PAGE SOURCE (DOM TREE) ==========")
    print("Test failed. Capturing page source and screenshot to help identify correct locators.")
    return await capture_page_source_and_screenshot(
        driver,
        artifacts_dir=artifacts_dir,
        page_source_file_name=f"page-source-{prefix}.xml",
        screenshot_file_name=f"screenshot-{prefix}.png",
    )


def report_api_failure(
    test_name: str,
    *,
    passed: bool,
    error: Optional[str] = None,
    duration_s: float = 0.0,
    debug: bool = False,
) -> None:
    if not passed and error:
        print("\n========== API TEST FAILURE ==========")
        print(f"Test: {test_name}")
        print(f"Error: {error}")
        print("=====================================\n")
    if debug:
        print(f'Test "{test_name}" completed in {duration_s * 1000:.0f}ms')
