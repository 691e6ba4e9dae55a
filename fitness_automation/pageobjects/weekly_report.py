from __future__ import annotations

from ..fluent_proxy import FluentProxy, create_fluent_proxy
from ..mobile.driver import MobileDriver, MobileDriverError
from .objects import WeeklyReportObjects
from .page import Page, ScreenVerificationError


class WeeklyReportPage(Page):
    """Weekly totals per muscle group and per exercise for a routine snapshot."""

    async def wait_for_screen(self) -> WeeklyReportPage:
        await self.driver.pause(2.0)
        await self.dismiss_alert_if_present()
        await self._expect_any_displayed(
            WeeklyReportObjects.weekly_report_screen,
            WeeklyReportObjects.screen_title,
            timeout_s=10.0,
        )
        return self

    async def wait_for_loading_to_complete(self) -> WeeklyReportPage:
        try:
            await self.driver.wait_for_displayed(WeeklyReportObjects.loading_indicator, timeout_s=5.0, reverse=True)
        except MobileDriverError:
            pass
        await self.driver.pause(1.0)
        return self

    async def _is_showing(self, locator) -> bool:
        try:
            return await self.driver.is_displayed(locator)
        except MobileDriverError:
            return False

    async def verify_report_displayed(self) -> WeeklyReportPage:
        await self.wait_for_loading_to_complete()
        if await self._is_showing(WeeklyReportObjects.loading_container):
            raise ScreenVerificationError("Report is still in loading state")
        if await self._is_showing(WeeklyReportObjects.error_container):
            raise ScreenVerificationError("Report is in error state")
        await self._expect_displayed(WeeklyReportObjects.weekly_report_screen)
        return self

    async def verify_empty_state(self) -> WeeklyReportPage:
        await self.wait_for_loading_to_complete()
        await self._expect_displayed(WeeklyReportObjects.empty_state)
        return self

    async def verify_error_state(self) -> WeeklyReportPage:
        await self.wait_for_loading_to_complete()
        await self._expect_displayed(WeeklyReportObjects.error_container)
        return self

    async def tap_reload(self) -> WeeklyReportPage:
        await self._expect_displayed(WeeklyReportObjects.reload_button)
        await self.driver.click(WeeklyReportObjects.reload_button)
        await self.driver.pause(1.0)
        return self

    async def verify_muscle_group_total(self, muscle_group_name: str, expected_sets: int) -> WeeklyReportPage:
        await self._expect_displayed(WeeklyReportObjects.muscle_group_by_name(muscle_group_name))
        sets_text = WeeklyReportObjects.sets_text_for_muscle_group(muscle_group_name, expected_sets)
        try:
            await self._expect_displayed(sets_text, timeout_s=3.0)
        except ScreenVerificationError as e:
            raise ScreenVerificationError(f"{muscle_group_name} does not show {expected_sets} sets") from e
        return self

    async def verify_exercise_total_displayed(
        self, exercise_name: str, total_reps: int, total_weight: float
    ) -> WeeklyReportPage:
        row = WeeklyReportObjects.exercise_total_by_name(exercise_name)
        try:
            await self.driver.scroll_into_view(row)
        except MobileDriverError:
            pass
        await self._expect_displayed(row)
        await self._expect_displayed(WeeklyReportObjects.total_reps_text(exercise_name, total_reps), timeout_s=3.0)
        await self._expect_displayed(WeeklyReportObjects.total_weight_text(exercise_name, total_weight), timeout_s=3.0)
        return self

    async def verify_exercise_totals_count(self, expected_count: int) -> WeeklyReportPage:
        if expected_count:
            await self._expect_displayed(WeeklyReportObjects.exercise_totals_section)
        found = len(await self.driver.find_all(WeeklyReportObjects.exercise_totals))
        if found != expected_count:
            raise ScreenVerificationError(f"Expected {expected_count} exercise total(s), found {found}")
        return self

    async def tap_back(self) -> WeeklyReportPage:
        await self._expect_displayed(WeeklyReportObjects.back_button)
        await self.driver.click(WeeklyReportObjects.back_button)
        await self.driver.pause(1.0)
        return self


def create_fluent_weekly_report_page(driver: MobileDriver, **kwargs) -> FluentProxy[WeeklyReportPage]:
    return create_fluent_proxy(WeeklyReportPage(driver, **kwargs))
