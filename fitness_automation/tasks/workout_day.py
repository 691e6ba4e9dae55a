from __future__ import annotations

from typing import Optional, Union

from ..mobile.driver import MobileDriver
from ..muscle_groups import MuscleGroupId
from ..pageobjects.my_routines import MyRoutinesPage
from ..pageobjects.routine_detail import RoutineDetailPage


class WorkoutDayTasks:
    def __init__(self, driver: MobileDriver) -> None:
        self.driver = driver
        self.my_routines = MyRoutinesPage(driver)
        self.routine_detail = RoutineDetailPage(driver)

    async def add_workout_day(
        self,
        routine_name: str,
        day_name: str,
        day_number_or_first_set: Optional[Union[int, str]] = None,
        *sets: str,
    ) -> None:
        """Open `routine_name` from the list and add a day with the given "X sets of Y" specs."""
        await self.my_routines.wait_for_screen()
        await self.my_routines.tap_routine_item(routine_name)
        await self.routine_detail.wait_for_screen()
        await self.routine_detail.add_workout_day(day_name, day_number_or_first_set, *sets)

    async def edit_workout_day_set(self, day_name: str, muscle_group_id: MuscleGroupId, number_of_sets: int) -> None:
        """Must already be on the routine detail screen."""
        await self.routine_detail.wait_for_screen()
        await self.routine_detail.edit_workout_day_set(day_name, muscle_group_id, number_of_sets)

    async def verify_workout_day_set(
        self, routine_name: str, day_name: str, muscle_group_name: str, number_of_sets: int
    ) -> None:
        await self.my_routines.wait_for_screen()
        await self.my_routines.tap_routine_item(routine_name)
        await self.driver.pause(1.0)
        await self.routine_detail.wait_for_screen()
        await self.routine_detail.verify_workout_day_set(day_name, muscle_group_name, number_of_sets)
