from __future__ import annotations

import random
import string
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .mobile.driver import MobileDriver

DOM_CAPTURES_DIR = "dom-captures"
SCREENSHOTS_DIR = "screenshots"
LOGS_DIR = "logs"


@dataclass(frozen=True)
class CaptureResult:
    page_source_path: Path
    screenshot_path: Path


def timestamp() -> str:
    # High-resolution timestamp so repeated captures don't overwrite.
    return datetime.now().strftime("%Y%m%d-%H%M%S-%f")


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def safe_stem(stem: str, *, fallback: str = "artifact") -> str:
    cleaned = "".join(c if c.isalnum() or c in ("-", "_") else "_" for c in stem.strip())
    return cleaned or fallback


def generate_random_string(length: int = 5) -> str:
    """Random suffix for test data names so parallel runs don't collide."""
    if length <= 0:
        raise ValueError("length must be > 0")
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def time_difference(label: str, start: float, end: float) -> float:
    elapsed = end - start
    print(f"{label} It took {elapsed:.3f} seconds.")
    return elapsed


async def capture_page_source_and_screenshot(
    driver: MobileDriver,
    *,
    artifacts_dir: Path,
    prefix: str = "",
    page_source_file_name: Optional[str] = None,
    screenshot_file_name: Optional[str] = None,
    log_to_console: bool = True,
) -> Optional[CaptureResult]:
    """
    Write the current page source and a screenshot under `artifacts_dir`.

    This is a diagnostic: if the session is gone or the device misbehaves the
    reason is printed and None is returned instead of raising.
    """
    dom_dir = artifacts_dir / DOM_CAPTURES_DIR
    screenshots_dir = artifacts_dir / SCREENSHOTS_DIR
    for directory in (dom_dir, screenshots_dir, artifacts_dir / LOGS_DIR):
        ensure_dir(directory)

    suffix = f"-{prefix}" if prefix else ""
    page_source_path = dom_dir / (page_source_file_name or f"page-source{suffix}.xml")
    screenshot_path = screenshots_dir / (screenshot_file_name or f"screenshot{suffix}.png")

    try:
        page_source = await driver.get_page_source()
        page_source_path.write_text(page_source, encoding="utf-8")
        screenshot_path.write_bytes(await driver.take_screenshot())
    except (RuntimeError, OSError) as e:
        print(f"Could not capture page source and screenshot: {e}")
        return None

    if log_to_console:
        print("\n========== PAGE CAPTURE ==========")
        print(f"Page source: {page_source_path}")
        print(f"Screenshot: {screenshot_path}")
        print("==================================\n")

    return CaptureResult(page_source_path=page_source_path, screenshot_path=screenshot_path)
