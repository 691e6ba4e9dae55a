from __future__ import annotations

from ...mobile.locators import Locator, accessibility_id, xpath, xpath_literal

_MUSCLE_GROUP_CARD = '//XCUIElementTypeOther[contains(@name, "muscle-group-") and contains(@label, {name})]'
_EXERCISE_TOTAL = '//XCUIElementTypeOther[starts-with(@name, "exercise-total-") and contains(@label, {name})]'


class WeeklyReportObjects:
    screen_title = accessibility_id("Weekly Report")
    weekly_report_screen = accessibility_id("weekly-report-screen")
    loading_container = accessibility_id("loading-container")
    loading_indicator = accessibility_id("loading-indicator")
    error_container = accessibility_id("error-container")
    reload_button = accessibility_id("reload-button")
    empty_state = accessibility_id("empty-state")
    back_button = xpath('//XCUIElementTypeButton[contains(@name, "back")]')
    exercise_totals_section = accessibility_id("exercise-totals-section")
    exercise_totals = xpath('//XCUIElementTypeOther[starts-with(@name, "exercise-total-")]')

    @staticmethod
    def muscle_group_card(muscle_group_id: int) -> Locator:
        return accessibility_id(f"muscle-group-{int(muscle_group_id)}")

    @staticmethod
    def muscle_group_by_name(muscle_group_name: str) -> Locator:
        return xpath(_MUSCLE_GROUP_CARD.format(name=xpath_literal(muscle_group_name)))

    @staticmethod
    def sets_text_for_muscle_group(muscle_group_name: str, expected_sets: int) -> Locator:
        card = _MUSCLE_GROUP_CARD.format(name=xpath_literal(muscle_group_name))
        return xpath(f'{card}//XCUIElementTypeStaticText[@label="{expected_sets}"]')

    @staticmethod
    def exercise_total_by_name(exercise_name: str) -> Locator:
        return xpath(_EXERCISE_TOTAL.format(name=xpath_literal(exercise_name)))

    @staticmethod
    def total_reps_text(exercise_name: str, total_reps: int) -> Locator:
        row = _EXERCISE_TOTAL.format(name=xpath_literal(exercise_name))
        return xpath(f'{row}//XCUIElementTypeStaticText[contains(@label, "{total_reps}")]')

    @staticmethod
    def total_weight_text(exercise_name: str, total_weight: float) -> Locator:
        row = _EXERCISE_TOTAL.format(name=xpath_literal(exercise_name))
        weight = f"{total_weight:g}"
        return xpath(f'{row}//XCUIElementTypeStaticText[contains(@label, "{weight}")]')
