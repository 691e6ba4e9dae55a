from __future__ import annotations

from ..mobile.driver import MobileDriver
from ..pageobjects.my_routines import MyRoutinesPage
from ..pageobjects.routine_detail import RoutineDetailPage
from ..pageobjects.weekly_report import WeeklyReportPage


class WeeklyReportTasks:
    def __init__(self, driver: MobileDriver) -> None:
        self.driver = driver
        self.my_routines = MyRoutinesPage(driver)
        self.routine_detail = RoutineDetailPage(driver)
        self.weekly_report = WeeklyReportPage(driver)

    async def navigate_to_report(self, routine_id: int) -> None:
        await self.my_routines.tap_report_button(routine_id)
        await self.weekly_report.wait_for_screen()

    async def navigate_to_report_by_name(self, routine_name: str) -> None:
        await self.my_routines.wait_for_screen()
        await self.my_routines.tap_report_button_by_name(routine_name)
        await self.weekly_report.wait_for_screen()

    async def view_report(self, routine_id: int) -> None:
        await self.navigate_to_report(routine_id)
        await self.weekly_report.wait_for_loading_to_complete()
        await self.weekly_report.verify_report_displayed()

    async def view_report_empty_state(self, routine_id: int) -> None:
        await self.navigate_to_report(routine_id)
        await self.weekly_report.wait_for_loading_to_complete()
        await self.weekly_report.verify_empty_state()

    async def view_report_with_error(self, routine_id: int) -> None:
        """Expect the error state, then tap reload and give the report time to refetch."""
        await self.navigate_to_report(routine_id)
        await self.weekly_report.wait_for_loading_to_complete()
        await self.weekly_report.verify_error_state()
        await self.weekly_report.tap_reload()
        await self.driver.pause(2.0)

    async def create_snapshot(self, routine_name: str) -> None:
        await self.my_routines.wait_for_screen()
        await self.my_routines.tap_routine_item(routine_name)
        await self.routine_detail.wait_for_screen()
        await self._snapshot_current_routine()

    async def create_snapshot_by_id(self, routine_id: int) -> None:
        """Snapshot the routine whose detail screen is already open."""
        print(f"Creating snapshot for routine {routine_id} from its detail screen")
        await self.routine_detail.wait_for_screen()
        await self._snapshot_current_routine()

    async def _snapshot_current_routine(self) -> None:
        await self.routine_detail.tap_create_snapshot()
        await self.routine_detail.wait_for_snapshot_creation_complete()
        await self.driver.pause(1.0)

    async def create_snapshot_and_view_report(self, routine_name: str) -> None:
        await self.create_snapshot(routine_name)
        await self.routine_detail.tap_back()
        await self.my_routines.wait_for_screen()
        await self.navigate_to_report_by_name(routine_name)

    async def verify_muscle_group_total(self, muscle_group_name: str, expected_sets: int) -> None:
        await self.weekly_report.verify_muscle_group_total(muscle_group_name, expected_sets)
