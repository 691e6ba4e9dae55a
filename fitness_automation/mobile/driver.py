"""
Async facade over `AppiumHTTPClient` for page objects.

Every WebDriver call is blocking (requests), so each one runs through
`asyncio.to_thread`. Waits poll the accessibility tree until a condition holds
or the (scaled) timeout expires.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

from .appium_http_client import AppiumHTTPClient, AppiumHTTPError, WebDriverElementRef
from .locators import Locator


class MobileDriverError(RuntimeError):
    pass


class ElementNotFoundError(MobileDriverError):
    def __init__(self, locator: Locator, *, index: int = 0, found: int = 0) -> None:
        if found:
            message = f"Element index out of range for {locator}: requested {index}, found {found} element(s)"
        else:
            message = f"No elements found for {locator}"
        super().__init__(message)
        self.locator = locator


class WaitTimeoutError(MobileDriverError):
    pass


class MobileDriver:
    def __init__(
        self,
        client: AppiumHTTPClient,
        *,
        poll_s: float = 0.25,
        timeout_scale: float = 1.0,
        pause_scale: float = 1.0,
    ) -> None:
        if poll_s <= 0:
            raise ValueError("poll_s must be > 0")
        if timeout_scale < 0 or pause_scale < 0:
            raise ValueError("timeout_scale and pause_scale must be >= 0")
        self.client = client
        self.poll_s = poll_s
        self.timeout_scale = timeout_scale
        self.pause_scale = pause_scale

    async def _call(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            return await asyncio.to_thread(fn, *args, **kwargs)
        except AppiumHTTPError as e:
            raise MobileDriverError(str(e)) from e

    async def pause(self, seconds: float) -> None:
        await asyncio.sleep(seconds * self.pause_scale)

    # -- lookup ----------------------------------------------------------------

    async def find_all(self, locator: Locator) -> list[WebDriverElementRef]:
        return await self._call(self.client.find_elements, using=locator.using, value=locator.value)

    async def find(self, locator: Locator, *, index: int = 0) -> WebDriverElementRef:
        if index < 0:
            raise ValueError("index must be >= 0")
        elements = await self.find_all(locator)
        if index >= len(elements):
            raise ElementNotFoundError(locator, index=index, found=len(elements))
        return elements[index]

    async def exists(self, locator: Locator) -> bool:
        return bool(await self.find_all(locator))

    async def is_displayed(self, locator: Locator) -> bool:
        elements = await self.find_all(locator)
        if not elements:
            return False
        return await self._call(self.client.is_element_displayed, elements[0])

    async def is_enabled(self, locator: Locator) -> bool:
        element = await self.find(locator)
        return await self._call(self.client.is_element_enabled, element)

    # -- waits -----------------------------------------------------------------

    async def wait_until(
        self,
        predicate: Callable[[], Awaitable[bool]],
        *,
        timeout_s: float,
        message: str,
    ) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout_s * self.timeout_scale
        last_error: Optional[MobileDriverError] = None
        while True:
            try:
                if await predicate():
                    return
            except MobileDriverError as e:
                last_error = e
            remaining = deadline - loop.time()
            if remaining <= 0:
                raise WaitTimeoutError(message) from last_error
            await asyncio.sleep(min(self.poll_s, remaining))

    async def wait_for_exist(self, locator: Locator, *, timeout_s: float = 5.0, reverse: bool = False) -> None:
        async def _check() -> bool:
            return (await self.exists(locator)) is not reverse

        state = "disappear" if reverse else "exist"
        await self.wait_until(_check, timeout_s=timeout_s, message=f"{locator} did not {state} within {timeout_s}s")

    async def wait_for_displayed(self, locator: Locator, *, timeout_s: float = 5.0, reverse: bool = False) -> None:
        async def _check() -> bool:
            return (await self.is_displayed(locator)) is not reverse

        state = "hide" if reverse else "become displayed"
        await self.wait_until(_check, timeout_s=timeout_s, message=f"{locator} did not {state} within {timeout_s}s")

    async def wait_for_enabled(self, locator: Locator, *, timeout_s: float = 2.0) -> None:
        await self.wait_until(
            lambda: self.is_enabled(locator),
            timeout_s=timeout_s,
            message=f"{locator} did not become enabled within {timeout_s}s",
        )

    # -- interaction -----------------------------------------------------------

    async def click(self, locator: Locator, *, index: int = 0) -> None:
        element = await self.find(locator, index=index)
        await self._call(self.client.click, element)

    async def double_click(self, locator: Locator) -> None:
        element = await self.find(locator)
        await self._call(self.client.click, element)
        await self._call(self.client.click, element)

    async def set_value(self, locator: Locator, text: str) -> None:
        element = await self.find(locator)
        await self._call(self.client.clear, element)
        await self._call(self.client.send_keys, element, text=text)

    async def get_attribute(self, locator: Locator, name: str, *, index: int = 0) -> Optional[str]:
        element = await self.find(locator, index=index)
        return await self._call(self.client.get_element_attribute, element, name)

    async def get_element_attribute(self, element: WebDriverElementRef, name: str) -> Optional[str]:
        return await self._call(self.client.get_element_attribute, element, name)

    async def get_text(self, locator: Locator) -> str:
        element = await self.find(locator)
        return await self._call(self.client.get_element_text, element)

    async def scroll_into_view(self, locator: Locator) -> None:
        element = await self.find(locator)
        await self._call(
            self.client.execute_script,
            "mobile: scroll",
            {"elementId": element.element_id, "toVisible": True},
        )

    async def scroll(self, direction: str, *, locator: Optional[Locator] = None) -> None:
        args: dict[str, Any] = {"direction": direction}
        if locator is not None:
            element = await self.find(locator)
            args["elementId"] = element.element_id
        await self._call(self.client.execute_script, "mobile: scroll", args)

    async def swipe(self, direction: str) -> None:
        await self._call(self.client.execute_script, "mobile: swipe", {"direction": direction})

    async def is_keyboard_shown(self) -> bool:
        return await self._call(self.client.is_keyboard_shown)

    async def hide_keyboard(self) -> None:
        await self._call(self.client.hide_keyboard)

    # -- alerts ----------------------------------------------------------------

    async def get_alert_text(self) -> Optional[str]:
        return await self._call(self.client.get_alert_text)

    async def accept_alert(self) -> None:
        await self._call(self.client.accept_alert)

    async def dismiss_alert(self) -> None:
        await self._call(self.client.dismiss_alert)

    # -- app lifecycle ---------------------------------------------------------

    async def terminate_app(self, bundle_id: str) -> None:
        await self._call(self.client.execute_script, "mobile: terminateApp", {"bundleId": bundle_id})

    async def activate_app(self, bundle_id: str) -> None:
        await self._call(self.client.execute_script, "mobile: activateApp", {"bundleId": bundle_id})

    async def relaunch_app(self, bundle_id: str) -> None:
        await self.terminate_app(bundle_id)
        await self.activate_app(bundle_id)

    # -- capture ---------------------------------------------------------------

    async def get_page_source(self) -> str:
        return await self._call(self.client.get_page_source)

    async def take_screenshot(self) -> bytes:
        return await self._call(self.client.get_screenshot_png_bytes)
