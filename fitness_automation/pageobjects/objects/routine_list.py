from __future__ import annotations

from ...mobile.locators import Locator, accessibility_id, xpath, xpath_literal


class RoutineListObjects:
    """Report buttons on the routine list rows."""

    @staticmethod
    def report_button(routine_id: int) -> Locator:
        return accessibility_id(f"report-routine-{routine_id}")

    @staticmethod
    def report_button_by_name(routine_name: str) -> Locator:
        return xpath(
            '//XCUIElementTypeOther[contains(@name, "routine-item") '
            f"and contains(@label, {xpath_literal(routine_name)})]"
            '//XCUIElementTypeOther[contains(@name, "report-routine")]'
        )
