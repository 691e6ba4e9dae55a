from __future__ import annotations

from ...mobile.locators import accessibility_id


class CreateRoutineObjects:
    create_routine_screen = accessibility_id("create-routine-screen")
    routine_name_input = accessibility_id("routine-name-input")
    routine_description_input = accessibility_id("routine-description-input")
    active_toggle = accessibility_id("routine-active-switch")
    create_button = accessibility_id("submit-button")
    success_popup = accessibility_id("Success")
    close_button = accessibility_id("OK")
    label_active = accessibility_id("Active")
    label_description = accessibility_id("Description")
    label_routine_name = accessibility_id("Routine Name *")
    back_button = accessibility_id("My Routines, back")
