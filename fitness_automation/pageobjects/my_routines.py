from __future__ import annotations

import re
from typing import Optional, Union

from ..fluent_proxy import FluentProxy, create_fluent_proxy
from ..mobile.appium_http_client import WebDriverElementRef
from ..mobile.driver import MobileDriver, MobileDriverError
from ..mobile.locators import Locator
from .objects import MyRoutinesObjects, RoutineListObjects
from .page import UI_ERRORS, Page, ScreenVerificationError

_ROUTINE_ID = re.compile(r"routine-item-touchable-(\d+)")


class MyRoutinesPage(Page):
    """The routine list that opens on launch."""

    async def wait_for_screen(self) -> MyRoutinesPage:
        await self.driver.pause(2.0)
        await self.dismiss_alert_if_present()
        await self._expect_any_displayed(
            MyRoutinesObjects.screen_title,
            MyRoutinesObjects.routine_list_screen,
            MyRoutinesObjects.routine_list_container,
        )
        return self

    async def tap_create_routine(self) -> MyRoutinesPage:
        await self.driver.click(MyRoutinesObjects.create_routine_button)
        return self

    async def get_routine_list(self) -> list[WebDriverElementRef]:
        return await self.driver.find_all(MyRoutinesObjects.routine_list)

    async def verify_routine_exists(self, routine_name: str) -> MyRoutinesPage:
        candidates = MyRoutinesObjects.routine_item_candidates(routine_name)
        timeouts = (5.0, 3.0, 3.0, 10.0)
        for locator, timeout_s in zip(candidates, timeouts):
            try:
                await self._expect_displayed(locator, timeout_s=timeout_s)
            except ScreenVerificationError:
                continue
            return self
        raise ScreenVerificationError(f"Routine {routine_name!r} is not in the list")

    async def tap_routine_item(self, index_or_name: Union[int, str]) -> MyRoutinesPage:
        """Open a routine by 1-based position or by (part of) its name."""
        if isinstance(index_or_name, int):
            item = MyRoutinesObjects.routine_item_touchable(index_or_name)
        else:
            item = MyRoutinesObjects.routine_item_touchable_by_name(index_or_name)
        await self._expect_displayed(item)
        await self.driver.click(item)
        return self

    async def tap_edit_routine(self, index: int) -> MyRoutinesPage:
        button = MyRoutinesObjects.edit_routine_button(index)
        await self._expect_displayed(button)
        await self.driver.click(button)
        return self

    async def tap_delete_routine(self, routine_name: str) -> MyRoutinesPage:
        button = MyRoutinesObjects.delete_routine_button(routine_name)
        await self._expect_displayed(button)
        await self.driver.click(button)
        await self.accept_alert_if_present()
        return self

    async def _scroll_to(self, locator: Locator, *, what: str) -> None:
        try:
            await self.driver.scroll_into_view(locator)
            await self.driver.pause(0.5)
            return
        except MobileDriverError:
            print(f"Initial scroll failed for {what}, trying alternative scroll...")
        try:
            await self.driver.scroll("down", locator=locator)
            await self.driver.pause(0.5)
        except MobileDriverError:
            print("Alternative scroll also failed, continuing...")

    async def _tap_report(self, button: Locator, *, what: str) -> None:
        try:
            await self.driver.wait_for_exist(button, timeout_s=5.0)
        except MobileDriverError as e:
            raise ScreenVerificationError(f"Report button for {what} does not exist") from e
        await self._scroll_to(button, what=f"report button {what}")
        await self._expect_displayed(button)
        await self.driver.click(button)
        await self.driver.pause(1.0)

    async def tap_report_button(self, routine_id: int) -> MyRoutinesPage:
        await self._tap_report(RoutineListObjects.report_button(routine_id), what=str(routine_id))
        return self

    async def _routine_id_for(self, routine_name: str) -> Optional[int]:
        item = MyRoutinesObjects.routine_item_touchable_by_name(routine_name)
        await self._expect_displayed(item)
        name_attr = await self.driver.get_attribute(item, "name")
        match = _ROUTINE_ID.search(name_attr or "")
        return int(match.group(1)) if match else None

    async def tap_report_button_by_name(self, routine_name: str) -> MyRoutinesPage:
        routine_id = await self._routine_id_for(routine_name)
        if routine_id is not None:
            return await self.tap_report_button(routine_id)
        await self._tap_report(RoutineListObjects.report_button_by_name(routine_name), what=repr(routine_name))
        return self

    async def _listed_routine_name(self, routine_name: str) -> Optional[str]:
        for element in await self.get_routine_list():
            try:
                label = await self.driver.get_element_attribute(element, "label")
            except MobileDriverError:
                continue
            if label and routine_name in label:
                return routine_name
        try:
            await self._routine_id_for(routine_name)
        except UI_ERRORS:
            return None
        return routine_name

    async def delete_routine_by_name(self, routine_name: str) -> MyRoutinesPage:
        """
        Best-effort cleanup: delete the routine through the UI if it is listed.

        Never raises for UI failures; a missing routine is treated as already deleted.
        """
        try:
            for _ in range(3):
                try:
                    await self.wait_for_screen()
                    break
                except UI_ERRORS:
                    await self.driver.pause(1.0)
            else:
                print("Screen wait failed, attempting to find routine anyway...")

            await self.driver.pause(0.5)
            if await self._listed_routine_name(routine_name) is None:
                print(f"Routine {routine_name!r} not found - may already be deleted")
                return self

            await self.tap_delete_routine(routine_name)
            await self.driver.pause(0.5)
            for confirm in MyRoutinesObjects.delete_confirm_candidates:
                try:
                    if await self.driver.is_displayed(confirm):
                        await self.driver.click(confirm)
                        await self.driver.pause(0.5)
                        break
                except MobileDriverError:
                    continue
            await self.driver.pause(0.5)
        except UI_ERRORS as e:
            print(f"Error deleting routine {routine_name!r}: {e}")
        return self


def create_fluent_my_routines_page(driver: MobileDriver, **kwargs) -> FluentProxy[MyRoutinesPage]:
    return create_fluent_proxy(MyRoutinesPage(driver, **kwargs))
