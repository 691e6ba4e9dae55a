from __future__ import annotations

from ...mobile.locators import Locator, accessibility_id, xpath, xpath_literal


class MyRoutinesObjects:
    screen_title = accessibility_id("My Routines")
    create_routine_button = accessibility_id("create-routine-button")
    routine_list = accessibility_id("Routine Item")
    routine_list_screen = accessibility_id("routine-list-screen")
    routine_list_container = accessibility_id("routine-list")

    @staticmethod
    def routine_item(index: int) -> Locator:
        """1-based position in the list."""
        return accessibility_id(f"routine-item-{index}")

    @staticmethod
    def routine_item_touchable(index: int) -> Locator:
        return accessibility_id(f"routine-item-touchable-{index}")

    @staticmethod
    def routine_item_touchable_by_name(routine_name: str) -> Locator:
        return xpath(
            '//XCUIElementTypeOther[contains(@name, "routine-item-touchable") '
            f"and contains(@label, {xpath_literal(routine_name)})]"
        )

    @staticmethod
    def routine_item_candidates(routine_name: str) -> tuple[Locator, ...]:
        """Fallback chain for finding a routine row, most specific first."""
        name = xpath_literal(routine_name)
        return (
            MyRoutinesObjects.routine_item_touchable_by_name(routine_name),
            xpath(f"//XCUIElementTypeOther[starts-with(@label, {name})]"),
            xpath(f'//XCUIElementTypeOther[contains(@name, "routine-item") and contains(@label, {name})]'),
            xpath(f"//XCUIElementTypeStaticText[@name={name}]"),
        )

    @staticmethod
    def edit_routine_button(index: int) -> Locator:
        return accessibility_id(f"edit-routine-{index}")

    @staticmethod
    def delete_routine_button(routine_name: str) -> Locator:
        return xpath(f"//*[@label={xpath_literal(f'Delete routine {routine_name}')}]")

    delete_confirm_candidates = (
        accessibility_id("Delete"),
        accessibility_id("Confirm"),
        accessibility_id("OK"),
        xpath('//XCUIElementTypeButton[@name="Delete"]'),
        xpath('//XCUIElementTypeButton[@name="Confirm"]'),
        xpath('//XCUIElementTypeButton[contains(@label, "Delete")]'),
    )
