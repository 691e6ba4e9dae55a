from __future__ import annotations

from ..mobile.driver import MobileDriver
from ..pageobjects.create_routine import CreateRoutinePage
from ..pageobjects.my_routines import MyRoutinesPage


class RoutineTasks:
    def __init__(self, driver: MobileDriver) -> None:
        self.driver = driver
        self.my_routines = MyRoutinesPage(driver)
        self.create_routine_page = CreateRoutinePage(driver)

    async def create_routine(self, name: str, description: str, is_active: bool = True) -> None:
        await self.my_routines.wait_for_screen()
        await self.my_routines.tap_create_routine()

        await self.create_routine_page.enter_routine_name(name)
        await self.create_routine_page.enter_routine_description(description)
        if is_active:
            await self.create_routine_page.verify_toggle_is_active()
        else:
            await self.create_routine_page.set_active_toggle(False)

        await self.create_routine_page.tap_create()
        await self.create_routine_page.close_popup()
        await self.my_routines.wait_for_screen()

    async def delete_routine(self, routine_name: str) -> None:
        await self.my_routines.wait_for_screen()
        await self.my_routines.tap_delete_routine(routine_name)
        await self.driver.pause(0.5)

    async def navigate_to_routine(self, routine_name: str) -> None:
        await self.my_routines.wait_for_screen()
        await self.my_routines.tap_routine_item(routine_name)
        await self.driver.pause(1.0)

    async def verify_routine_exists(self, routine_name: str) -> None:
        await self.my_routines.wait_for_screen()
        await self.my_routines.verify_routine_exists(routine_name)
