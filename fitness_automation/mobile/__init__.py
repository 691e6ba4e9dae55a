"""
Appium plumbing for the XQ Fitness iOS app.

- `AppiumHTTPClient` speaks W3C WebDriver over HTTP (blocking).
- `MobileDriver` is the async facade page objects use.
- Capabilities come from an explicit JSON file; nothing is defaulted.
"""

from .appium_http_client import AppiumHTTPClient, AppiumHTTPError, WebDriverElementRef
from .driver import ElementNotFoundError, MobileDriver, MobileDriverError, WaitTimeoutError
from .locators import Locator, accessibility_id, xpath, xpath_literal

__all__ = [
    "AppiumHTTPClient",
    "AppiumHTTPError",
    "WebDriverElementRef",
    "MobileDriver",
    "MobileDriverError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "Locator",
    "accessibility_id",
    "xpath",
    "xpath_literal",
]
