from __future__ import annotations

from ..fluent_proxy import FluentProxy, create_fluent_proxy
from ..mobile.driver import MobileDriver, MobileDriverError, WaitTimeoutError
from .objects import CreateRoutineObjects
from .page import Page, ScreenVerificationError

_TRUTHY_SWITCH_VALUES = ("1", "true")


class CreateRoutinePage(Page):
    """The "Create Routine" form."""

    async def wait_for_screen(self) -> CreateRoutinePage:
        await self._expect_displayed(CreateRoutineObjects.create_routine_screen)
        return self

    async def enter_routine_name(self, name: str) -> CreateRoutinePage:
        await self.driver.set_value(CreateRoutineObjects.routine_name_input, name)
        return self

    async def enter_routine_description(self, description: str) -> CreateRoutinePage:
        await self.driver.set_value(CreateRoutineObjects.routine_description_input, description)
        return self

    async def _toggle_is_on(self) -> tuple[bool, str]:
        value = await self.driver.get_attribute(CreateRoutineObjects.active_toggle, "value")
        return (value or "").lower() in _TRUTHY_SWITCH_VALUES, str(value)

    async def set_active_toggle(self, enabled: bool) -> CreateRoutinePage:
        is_on, _ = await self._toggle_is_on()
        if enabled != is_on:
            await self.driver.click(CreateRoutineObjects.active_toggle)
        return self

    async def verify_toggle_is_active(self) -> CreateRoutinePage:
        is_on, value = await self._toggle_is_on()
        if not is_on:
            raise ScreenVerificationError(f"Toggle is not active. Current value: {value}")
        return self

    async def _hide_keyboard(self) -> None:
        # Tapping a static label is the reliable way to drop the iOS keyboard.
        try:
            await self.driver.click(CreateRoutineObjects.label_active)
            await self.driver.pause(0.2)
        except MobileDriverError as e:
            print(f"Keyboard dismissal failed: {e}")

        async def _hidden() -> bool:
            return not await self.driver.is_keyboard_shown()

        try:
            await self.driver.wait_until(_hidden, timeout_s=2.0, message="Keyboard did not hide within timeout")
        except WaitTimeoutError:
            print("Keyboard visibility check completed")

    async def tap_create(self) -> CreateRoutinePage:
        await self._hide_keyboard()
        await self._expect_displayed(CreateRoutineObjects.create_button)
        if not await self.driver.is_enabled(CreateRoutineObjects.create_button):
            raise ScreenVerificationError("Create Routine button is disabled. Form may be invalid.")
        await self.driver.click(CreateRoutineObjects.create_button)
        print("Create button clicked successfully")
        return self

    async def close_popup(self) -> CreateRoutinePage:
        try:
            await self._expect_displayed(CreateRoutineObjects.success_popup)
            await self.driver.click(CreateRoutineObjects.close_button)
        except (MobileDriverError, ScreenVerificationError):
            print("Success popup not found, assuming automatic navigation")
        return self

    async def tap_back(self) -> CreateRoutinePage:
        await self._expect_displayed(CreateRoutineObjects.back_button)
        await self.driver.click(CreateRoutineObjects.back_button)
        return self


def create_fluent_create_routine_page(driver: MobileDriver, **kwargs) -> FluentProxy[CreateRoutinePage]:
    return create_fluent_proxy(CreateRoutinePage(driver, **kwargs))
