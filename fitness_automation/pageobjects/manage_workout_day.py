from __future__ import annotations

from ..fluent_proxy import FluentProxy, create_fluent_proxy
from ..mobile.driver import MobileDriver, MobileDriverError, WaitTimeoutError
from ..muscle_groups import MuscleGroupId, parse_set_spec
from .objects import ManageWorkoutDayObjects
from .page import Page, ScreenVerificationError

# Groups at the bottom of the list end up behind the keyboard without an extra scroll.
_BOTTOM_MUSCLE_GROUP_ID = MuscleGroupId.LOWER_BACK


class ManageWorkoutDayPage(Page):
    """Form for creating or editing a workout day and its per-muscle-group sets."""

    async def wait_for_screen(self) -> ManageWorkoutDayPage:
        await self._expect_displayed(ManageWorkoutDayObjects.day_number_input, timeout_s=10.0)
        await self.driver.pause(0.5)
        return self

    async def is_screen_displayed(self) -> bool:
        return await self.driver.is_displayed(ManageWorkoutDayObjects.screen_title)

    async def enter_day_number(self, day_number: int) -> ManageWorkoutDayPage:
        day_number_input = await self._expect_any_displayed(
            ManageWorkoutDayObjects.day_number_input,
            ManageWorkoutDayObjects.day_number_text_field,
        )
        await self._expect_enabled(day_number_input)
        await self.driver.click(day_number_input)
        await self.driver.pause(0.6)
        await self.driver.set_value(day_number_input, str(day_number))
        await self.driver.pause(0.3)
        return self

    async def enter_day_name(self, day_name: str) -> ManageWorkoutDayPage:
        await self._fill(ManageWorkoutDayObjects.day_name_input, day_name)
        return self

    async def add_set(self, set_spec: str) -> ManageWorkoutDayPage:
        """Enter a "4 sets of chest" style spec."""
        spec = parse_set_spec(set_spec)
        return await self.enter_sets_for_muscle_group(spec.muscle_group_id, spec.number_of_sets)

    async def _hide_keyboard(self) -> None:
        if not await self.driver.is_keyboard_shown():
            return
        print("Keyboard is shown, attempting to dismiss...")
        for target in (ManageWorkoutDayObjects.notes_label, ManageWorkoutDayObjects.manage_workout_day_screen):
            try:
                if await self.driver.is_displayed(target):
                    await self.driver.click(target)
                    await self.driver.pause(0.2)
                    break
            except MobileDriverError:
                continue
        else:
            print("Could not find element to dismiss keyboard")

        async def _hidden() -> bool:
            return not await self.driver.is_keyboard_shown()

        await self.driver.wait_until(_hidden, timeout_s=2.0, message="Keyboard did not hide within timeout")
        print("Keyboard dismissed")

    async def enter_sets_for_muscle_group(self, muscle_group_id: int, number_of_sets: int) -> ManageWorkoutDayPage:
        print(f"Entering {number_of_sets} sets for muscle group {muscle_group_id}...")
        sets_input = ManageWorkoutDayObjects.sets_input_for_muscle_group(muscle_group_id)
        try:
            await self.driver.wait_for_exist(sets_input, timeout_s=5.0)
        except WaitTimeoutError as e:
            raise ScreenVerificationError(f"No sets input for muscle group {muscle_group_id}") from e

        try:
            await self.driver.scroll_into_view(sets_input)
            await self.driver.pause(0.5)
            if muscle_group_id >= _BOTTOM_MUSCLE_GROUP_ID:
                try:
                    await self.driver.scroll("down", locator=sets_input)
                    await self.driver.pause(0.3)
                except MobileDriverError:
                    pass
        except MobileDriverError:
            print(f"Scroll failed for muscle group {muscle_group_id}, trying alternative scroll...")
            try:
                await self.driver.scroll("down", locator=sets_input)
                await self.driver.pause(0.5)
            except MobileDriverError:
                print(f"Alternative scroll also failed for muscle group {muscle_group_id}, continuing...")

        await self._expect_displayed(sets_input)
        await self._expect_enabled(sets_input)
        await self.driver.click(sets_input)
        await self.driver.pause(0.4)

        try:
            if await self.driver.is_keyboard_shown() and not await self.driver.is_displayed(sets_input):
                await self._hide_keyboard()
                await self.driver.scroll_into_view(sets_input)
                await self.driver.pause(0.3)
        except MobileDriverError as e:
            print(f"Could not check keyboard visibility after click: {e}")

        await self.driver.set_value(sets_input, str(number_of_sets))
        print(f"Set value {number_of_sets} for muscle group {muscle_group_id}")
        await self.driver.pause(0.3)
        return self

    async def save_workout_day(self) -> ManageWorkoutDayPage:
        notes = ManageWorkoutDayObjects.notes_label
        try:
            if not await self.driver.is_displayed(notes):
                await self.driver.swipe("down")
            if await self.driver.is_displayed(notes):
                # A double tap on the label closes the keyboard without focusing anything.
                await self.driver.double_click(notes)
                await self.driver.pause(0.4)
        except MobileDriverError:
            pass

        save_button = ManageWorkoutDayObjects.save_workout_day_button
        await self.driver.scroll_into_view(save_button)
        await self.driver.pause(1.5)
        await self._expect_displayed(save_button)
        await self.driver.click(save_button)
        await self.driver.pause(0.5)
        await self.accept_alert_if_present()
        return self

    async def tap_back(self) -> ManageWorkoutDayPage:
        await self.driver.click(ManageWorkoutDayObjects.back_button)
        return self


def create_fluent_manage_workout_day_page(driver: MobileDriver, **kwargs) -> FluentProxy[ManageWorkoutDayPage]:
    return create_fluent_proxy(ManageWorkoutDayPage(driver, **kwargs))
