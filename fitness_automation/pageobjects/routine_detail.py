from __future__ import annotations

from typing import Optional, Union

from ..fluent_proxy import FluentProxy, create_fluent_proxy
from ..mobile.driver import MobileDriver, MobileDriverError
from ..muscle_groups import MuscleGroupId
from .manage_workout_day import ManageWorkoutDayPage
from .objects import ManageWorkoutDayObjects, RoutineDetailObjects
from .page import UI_ERRORS, Page, ScreenVerificationError


class RoutineDetailPage(Page):
    """
    A single routine: its workout days, their sets, and the snapshot button.

    Adding or editing a day opens the Manage Workout Day form; the form steps are
    delegated to `ManageWorkoutDayPage` so both pages fill it the same way.
    """

    def __init__(self, driver: MobileDriver, **kwargs) -> None:
        super().__init__(driver, **kwargs)
        self.workout_day_form = ManageWorkoutDayPage(driver, **kwargs)

    async def wait_for_screen(self) -> RoutineDetailPage:
        await self._expect_any_displayed(RoutineDetailObjects.routine_detail_screen, RoutineDetailObjects.screen_title)
        return self

    async def tap_add_workout_day(self) -> RoutineDetailPage:
        try:
            await self._expect_displayed(RoutineDetailObjects.add_first_day_button, timeout_s=2.0)
            await self.driver.click(RoutineDetailObjects.add_first_day_button)
            print('Clicked "Add First Day" button')
            return self
        except ScreenVerificationError:
            print('"Add First Day" button not found, trying "Add Day" button')

        await self._expect_displayed(RoutineDetailObjects.add_workout_day_button)
        await self.driver.click(RoutineDetailObjects.add_workout_day_button)
        print('Clicked "Add Day" button')
        return self

    async def add_workout_day(
        self,
        day_name: str,
        day_number_or_first_set: Optional[Union[int, str]] = None,
        *sets: str,
    ) -> RoutineDetailPage:
        """
        Add a day with sets given as "X sets of <muscle group>".

        The second argument is either the day number or, when it is a string,
        the first set spec (the day number then defaults to 1).
        """
        if isinstance(day_number_or_first_set, int):
            day_number = day_number_or_first_set
            set_specs = list(sets)
        else:
            day_number = 1
            set_specs = ([day_number_or_first_set] if day_number_or_first_set else []) + list(sets)

        form = self.workout_day_form
        await self.tap_add_workout_day()
        await self.driver.pause(1.0)
        await form.wait_for_screen()
        await form.enter_day_number(day_number)
        await form.enter_day_name(day_name)

        try:
            if await self.driver.is_displayed(ManageWorkoutDayObjects.notes_label):
                await self.driver.click(ManageWorkoutDayObjects.notes_label)
                await self.driver.pause(0.3)
        except MobileDriverError:
            pass

        for anchor in (ManageWorkoutDayObjects.first_muscle_group_container, ManageWorkoutDayObjects.first_sets_input):
            try:
                await self.driver.scroll_into_view(anchor)
                await self.driver.pause(0.5)
                break
            except MobileDriverError:
                continue

        print(f"Adding {len(set_specs)} sets...")
        for position, spec in enumerate(set_specs, 1):
            print(f"Adding set {position}/{len(set_specs)}: {spec}")
            await form.add_set(spec)
            if position < len(set_specs):
                try:
                    await self.driver.click(ManageWorkoutDayObjects.notes_label)
                except MobileDriverError:
                    pass
                await self.driver.pause(0.4)

        print("Saving workout day...")
        await form.save_workout_day()
        return self

    async def edit_workout_day_set(
        self, day_name: str, muscle_group_id: MuscleGroupId, number_of_sets: int
    ) -> RoutineDetailPage:
        await self.driver.click(RoutineDetailObjects.edit_button_for_day(day_name))
        await self.workout_day_form.enter_sets_for_muscle_group(muscle_group_id, number_of_sets)
        await self.workout_day_form.save_workout_day()
        return self

    async def verify_workout_day_set(self, day_name: str, muscle_group_name: str, number_of_sets: int) -> RoutineDetailPage:
        container = RoutineDetailObjects.muscle_group_container_for_day(day_name, muscle_group_name, number_of_sets)
        try:
            await self._expect_displayed(container)
        except ScreenVerificationError as e:
            raise ScreenVerificationError(
                f"Day {day_name!r} does not show {number_of_sets} sets of {muscle_group_name}"
            ) from e
        return self

    async def tap_exercises_for_day(self, day_name: str) -> RoutineDetailPage:
        """Open the exercise list (Manage Exercise) for a workout day."""
        button = RoutineDetailObjects.exercises_button_for_day(day_name)
        try:
            await self.driver.scroll_into_view(button)
            await self.driver.pause(0.5)
        except MobileDriverError:
            pass
        await self._expect_displayed(button)
        await self.driver.click(button)
        await self.driver.pause(1.0)
        return self

    async def tap_create_snapshot(self) -> RoutineDetailPage:
        await self._expect_displayed(RoutineDetailObjects.create_snapshot_button)
        await self.driver.click(RoutineDetailObjects.create_snapshot_button)
        await self.driver.pause(1.0)
        return self

    async def verify_snapshot_creating(self) -> RoutineDetailPage:
        await self._expect_displayed(RoutineDetailObjects.create_snapshot_button)
        return self

    async def wait_for_snapshot_creation_complete(self) -> RoutineDetailPage:
        await self.driver.pause(3.0)
        try:
            await self._expect_displayed(RoutineDetailObjects.snapshot_toast)
        except UI_ERRORS:
            # The toast is short-lived and may already be gone.
            pass
        await self.driver.pause(1.0)
        return self

    async def tap_back(self) -> RoutineDetailPage:
        await self._expect_displayed(RoutineDetailObjects.back_button)
        await self.driver.click(RoutineDetailObjects.back_button)
        return self


def create_fluent_routine_detail_page(driver: MobileDriver, **kwargs) -> FluentProxy[RoutineDetailPage]:
    return create_fluent_proxy(RoutineDetailPage(driver, **kwargs))
