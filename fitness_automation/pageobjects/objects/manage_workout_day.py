from __future__ import annotations

from ...mobile.locators import Locator, accessibility_id, xpath


class ManageWorkoutDayObjects:
    manage_workout_day_screen = accessibility_id("manage-workout-day-screen")
    screen_title = accessibility_id("Manage Workout Day")
    back_button = accessibility_id("Routine Details, back")
    day_number_input = accessibility_id("day-number-input")
    day_number_text_field = xpath('//XCUIElementTypeTextField[@name="day-number-input"]')
    day_name_input = accessibility_id("day-name-input")
    notes_label = accessibility_id("Notes")
    first_muscle_group_container = accessibility_id("muscle-group-1")
    first_sets_input = accessibility_id("sets-input-1")
    save_workout_day_button = xpath(
        '//XCUIElementTypeOther[@name="submit-button" '
        'or @label="Create Workout Day" or @label="Update Workout Day"]'
    )

    @staticmethod
    def sets_input_for_muscle_group(muscle_group_id: int) -> Locator:
        return accessibility_id(f"sets-input-{int(muscle_group_id)}")
