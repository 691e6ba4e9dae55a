from __future__ import annotations

from ...mobile.locators import Locator, accessibility_id, xpath, xpath_literal

_DAY_ROW = '//XCUIElementTypeOther[starts-with(@name, "workout-day-") and contains(@label, {day})]'


class RoutineDetailObjects:
    screen_title = accessibility_id("Routine Details")
    routine_detail_screen = accessibility_id("routine-detail-screen")
    add_workout_day_button = accessibility_id("add-workout-day-button")
    add_first_day_button = accessibility_id("add-first-day-button")
    back_button = xpath('//XCUIElementTypeButton[@name="My Routines, back"]')
    create_snapshot_button = accessibility_id("create-snapshot-button")
    snapshot_toast = xpath(
        '//XCUIElementTypeStaticText[contains(@label, "snapshot") or contains(@label, "Snapshot")]'
    )

    @staticmethod
    def day_row(day_name: str) -> Locator:
        return xpath(_DAY_ROW.format(day=xpath_literal(day_name)))

    @staticmethod
    def edit_button_for_day(day_name: str) -> Locator:
        row = _DAY_ROW.format(day=xpath_literal(day_name))
        return xpath(f'{row}//XCUIElementTypeOther[starts-with(@name, "edit-day-")]')

    @staticmethod
    def delete_button_for_day(day_name: str) -> Locator:
        row = _DAY_ROW.format(day=xpath_literal(day_name))
        return xpath(f'{row}//XCUIElementTypeOther[starts-with(@name, "delete-day-")]')

    @staticmethod
    def exercises_button_for_day(day_name: str) -> Locator:
        row = _DAY_ROW.format(day=xpath_literal(day_name))
        return xpath(f'{row}//XCUIElementTypeOther[starts-with(@name, "exercises-day-")]')

    @staticmethod
    def muscle_group_container_for_day(day_name: str, muscle_group_name: str, number_of_sets: int) -> Locator:
        row = _DAY_ROW.format(day=xpath_literal(day_name))
        label = xpath_literal(f"{muscle_group_name} {number_of_sets} sets")
        return xpath(f"{row}//XCUIElementTypeOther[@name={label}]")
