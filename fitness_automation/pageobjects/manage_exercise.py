from __future__ import annotations

from typing import Optional

from ..fluent_proxy import FluentProxy, create_fluent_proxy
from ..mobile.driver import MobileDriver, MobileDriverError, WaitTimeoutError
from ..mobile.locators import Locator
from .objects import ManageExerciseObjects
from .page import Page


class ManageExercisePage(Page):
    """Exercise list for a workout day and the add/edit exercise form."""

    async def wait_for_screen(self) -> ManageExercisePage:
        await self._expect_any_displayed(
            ManageExerciseObjects.manage_exercise_screen,
            ManageExerciseObjects.screen_title,
            timeout_s=10.0,
        )
        await self.driver.pause(0.5)
        return self

    async def enter_exercise_name(self, exercise_name: str) -> ManageExercisePage:
        await self._fill(ManageExerciseObjects.exercise_name_input, exercise_name)
        return self

    async def enter_total_reps(self, total_reps: int) -> ManageExercisePage:
        await self._fill(ManageExerciseObjects.total_reps_input, str(total_reps))
        return self

    async def enter_weight(self, weight: float) -> ManageExercisePage:
        await self._fill(ManageExerciseObjects.weight_input, f"{weight:g}")
        return self

    async def _reveal_lower_field(self, locator: Locator) -> None:
        # The keyboard covers the bottom half of the form.
        try:
            await self.driver.swipe("up")
            await self.driver.pause(0.3)
        except MobileDriverError:
            pass
        await self.driver.scroll_into_view(locator)
        await self.driver.pause(0.5)

    async def enter_total_sets(self, total_sets: int) -> ManageExercisePage:
        total_sets_input = ManageExerciseObjects.total_sets_input
        await self.driver.wait_for_exist(total_sets_input, timeout_s=5.0)
        await self._reveal_lower_field(total_sets_input)
        await self._fill(total_sets_input, str(total_sets))
        return self

    async def enter_notes(self, notes: str) -> ManageExercisePage:
        """Notes are optional; older builds have no notes field and this is a no-op there."""
        notes_input = ManageExerciseObjects.notes_input
        try:
            await self.driver.wait_for_exist(notes_input, timeout_s=3.0)
        except WaitTimeoutError:
            return self
        await self._reveal_lower_field(notes_input)
        if not await self.driver.is_displayed(notes_input):
            return self
        await self.driver.click(notes_input)
        await self.driver.pause(0.2)
        await self.driver.set_value(notes_input, notes)
        await self.driver.pause(0.2)
        return self

    async def _dismiss_keyboard(self) -> None:
        if not await self.driver.is_keyboard_shown():
            return
        try:
            await self.driver.hide_keyboard()
        except MobileDriverError:
            # hideKeyboard is not always supported on iOS.
            try:
                await self.driver.click(ManageExerciseObjects.notes_optional_label)
            except MobileDriverError:
                await self.driver.click(ManageExerciseObjects.notes_label)
        print("Keyboard dismissed before tapping Save/Add")
        await self.driver.pause(0.3)

    async def tap_save(self) -> ManageExercisePage:
        save_button = ManageExerciseObjects.save_button
        await self._dismiss_keyboard()
        try:
            await self.driver.scroll_into_view(save_button)
        except MobileDriverError:
            pass
        await self._expect_displayed(save_button)
        await self.driver.click(save_button)
        await self.accept_alert_if_present()
        return self

    async def tap_cancel(self) -> ManageExercisePage:
        await self._expect_displayed(ManageExerciseObjects.cancel_button)
        await self.driver.click(ManageExerciseObjects.cancel_button)
        await self.driver.pause(0.5)
        return self

    async def tap_delete(self) -> ManageExercisePage:
        await self._expect_displayed(ManageExerciseObjects.delete_button)
        await self.driver.click(ManageExerciseObjects.delete_button)
        await self.driver.pause(0.5)
        await self.accept_alert_if_present()
        return self

    async def verify_exercise_displayed(
        self,
        exercise_name: str,
        total_reps: Optional[int] = None,
        weight: Optional[float] = None,
        total_sets: Optional[int] = None,
    ) -> ManageExercisePage:
        """Check the form shows the exercise fields; optional values select which fields must be present."""
        await self._expect_displayed(ManageExerciseObjects.exercise_name_input)
        expected = (
            (total_reps, ManageExerciseObjects.total_reps_input),
            (weight, ManageExerciseObjects.weight_input),
            (total_sets, ManageExerciseObjects.total_sets_input),
        )
        for value, locator in expected:
            if value is not None:
                await self._expect_displayed(locator)
        return self

    async def _scroll_and_tap(self, locator: Locator) -> None:
        await self.driver.scroll_into_view(locator)
        await self.driver.pause(0.5)
        await self._expect_displayed(locator)
        await self.driver.click(locator)
        await self.driver.pause(1.0)

    async def tap_add_exercise_for_muscle_group(self, muscle_group_name: str) -> ManageExercisePage:
        await self._scroll_and_tap(ManageExerciseObjects.add_exercise_button_for_muscle_group(muscle_group_name))
        return self

    async def tap_exercise_item(self, exercise_name: str) -> ManageExercisePage:
        await self._scroll_and_tap(ManageExerciseObjects.exercise_item(exercise_name))
        return self

    async def tap_back(self) -> ManageExercisePage:
        await self._expect_displayed(ManageExerciseObjects.back_button)
        await self.driver.click(ManageExerciseObjects.back_button)
        await self.driver.pause(0.5)
        return self


def create_fluent_manage_exercise_page(driver: MobileDriver, **kwargs) -> FluentProxy[ManageExercisePage]:
    return create_fluent_proxy(ManageExercisePage(driver, **kwargs))
