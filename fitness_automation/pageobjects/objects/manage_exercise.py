from __future__ import annotations

from ...mobile.locators import Locator, accessibility_id, xpath, xpath_literal
from ...muscle_groups import muscle_group_id


class ManageExerciseObjects:
    screen_title = accessibility_id("Manage Exercise")
    manage_exercise_screen = accessibility_id("manage-exercise-screen")
    exercise_name_input = accessibility_id("exercise-name-input")
    total_reps_input = accessibility_id("total-reps-input")
    weight_input = accessibility_id("weight-input")
    total_sets_input = accessibility_id("total-sets-input")
    notes_input = accessibility_id("exercise-notes-input")
    notes_label = accessibility_id("Notes")
    notes_optional_label = accessibility_id("Notes (optional)")
    save_button = accessibility_id("exercise-submit-button")
    add_exercise_button = accessibility_id("add-exercise-button")
    cancel_button = accessibility_id("exercise-cancel-button")
    delete_button = accessibility_id("delete-exercise-button")
    back_button = xpath('//XCUIElementTypeButton[contains(@name, "back")]')

    @staticmethod
    def add_exercise_button_for_muscle_group(muscle_group_name: str) -> Locator:
        """Each muscle group row has its own add-exercise-button-{id}."""
        return accessibility_id(f"add-exercise-button-{int(muscle_group_id(muscle_group_name))}")

    @staticmethod
    def exercise_item(exercise_name: str) -> Locator:
        return xpath(
            '//XCUIElementTypeOther[contains(@name, "exercise-item-") '
            f"and contains(@label, {xpath_literal(exercise_name)})]"
        )
