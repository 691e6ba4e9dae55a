"""Page object flows against the in-memory Appium client."""
import pytest

from fitness_automation.muscle_groups import MuscleGroupId
from fitness_automation.pageobjects import (
    CreateRoutinePage,
    ManageExercisePage,
    MyRoutinesPage,
    RoutineDetailPage,
    ScreenVerificationError,
    WeeklyReportPage,
    create_fluent_create_routine_page,
    create_fluent_weekly_report_page,
)
from fitness_automation.pageobjects.objects import (
    CreateRoutineObjects,
    ManageExerciseObjects,
    ManageWorkoutDayObjects,
    MyRoutinesObjects,
    RoutineDetailObjects,
    RoutineListObjects,
    WeeklyReportObjects,
)


def typed(fake_client):
    return [target for action, target in fake_client.calls if action == "send_keys"]


# -- My Routines -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_my_routines_wait_dismisses_alert_and_uses_fallback(driver, fake_client):
    """Test that a stray alert is dismissed and the list container is accepted."""
    fake_client.alert_text = "Allow notifications?"
    fake_client.add(MyRoutinesObjects.routine_list_container)

    page = await MyRoutinesPage(driver).wait_for_screen()

    assert isinstance(page, MyRoutinesPage)
    assert ("dismiss_alert", "Allow notifications?") in fake_client.calls


@pytest.mark.asyncio
async def test_my_routines_wait_fails_off_screen(driver):
    """Test that none of the screen markers being present is a verification error."""
    with pytest.raises(ScreenVerificationError, match="None of the expected elements"):
        await MyRoutinesPage(driver).wait_for_screen()


@pytest.mark.asyncio
async def test_verify_routine_exists_uses_static_text_fallback(driver, fake_client):
    """Test the last-resort locator for a routine row."""
    fake_client.add(MyRoutinesObjects.routine_item_candidates("Push Day")[-1])

    await MyRoutinesPage(driver).verify_routine_exists("Push Day")


@pytest.mark.asyncio
async def test_verify_routine_exists_missing(driver):
    """Test the error for a routine that is not listed."""
    with pytest.raises(ScreenVerificationError, match="'Push Day' is not in the list"):
        await MyRoutinesPage(driver).verify_routine_exists("Push Day")


@pytest.mark.asyncio
async def test_tap_routine_item_by_index_and_name(driver, fake_client):
    """Test opening a routine by position and by name."""
    fake_client.add(MyRoutinesObjects.routine_item_touchable(2))
    fake_client.add(MyRoutinesObjects.routine_item_touchable_by_name("Leg Day"))
    page = MyRoutinesPage(driver)

    await page.tap_routine_item(2)
    await page.tap_routine_item("Leg Day")

    assert fake_client.clicked() == [
        str(MyRoutinesObjects.routine_item_touchable(2)),
        str(MyRoutinesObjects.routine_item_touchable_by_name("Leg Day")),
    ]


@pytest.mark.asyncio
async def test_tap_report_button_by_name_reads_routine_id(driver, fake_client):
    """Test that the routine id is taken from the row's accessibility id."""
    fake_client.add(
        MyRoutinesObjects.routine_item_touchable_by_name("Push Day"),
        attributes={"name": "routine-item-touchable-42"},
    )
    report = fake_client.add(RoutineListObjects.report_button(42))

    await MyRoutinesPage(driver).tap_report_button_by_name("Push Day")

    assert fake_client.clicked() == [str(RoutineListObjects.report_button(42))]
    assert fake_client.scripts[0] == ("mobile: scroll", ({"elementId": report.element_id, "toVisible": True},))


@pytest.mark.asyncio
async def test_tap_report_button_by_name_falls_back_to_row_xpath(driver, fake_client):
    """Test the report button lookup when the row has no numeric id."""
    fake_client.add(
        MyRoutinesObjects.routine_item_touchable_by_name("Push Day"),
        attributes={"name": "routine-item"},
    )
    fake_client.add(RoutineListObjects.report_button_by_name("Push Day"))

    await MyRoutinesPage(driver).tap_report_button_by_name("Push Day")

    assert fake_client.clicked() == [str(RoutineListObjects.report_button_by_name("Push Day"))]


@pytest.mark.asyncio
async def test_delete_routine_by_name_missing_is_noop(driver, fake_client):
    """Test that cleanup of an already-deleted routine does nothing."""
    fake_client.add(MyRoutinesObjects.screen_title)

    await MyRoutinesPage(driver).delete_routine_by_name("Gone")

    assert fake_client.clicked() == []


@pytest.mark.asyncio
async def test_delete_routine_by_name_confirms(driver, fake_client):
    """Test deleting a listed routine and confirming the dialog."""
    fake_client.add(MyRoutinesObjects.screen_title)
    fake_client.add(MyRoutinesObjects.routine_list, attributes={"label": "Push Day, 3 workout days"})
    fake_client.add(MyRoutinesObjects.delete_routine_button("Push Day"))
    fake_client.add(MyRoutinesObjects.delete_confirm_candidates[1])

    await MyRoutinesPage(driver).delete_routine_by_name("Push Day")

    assert fake_client.clicked() == [
        str(MyRoutinesObjects.delete_routine_button("Push Day")),
        str(MyRoutinesObjects.delete_confirm_candidates[1]),
    ]


# -- Create Routine --------------------------------------------------------------


@pytest.mark.asyncio
async def test_set_active_toggle_only_clicks_when_needed(driver, fake_client):
    """Test that the switch is tapped only when its state differs."""
    fake_client.add(CreateRoutineObjects.active_toggle, attributes={"value": "1"})
    page = CreateRoutinePage(driver)

    await page.set_active_toggle(True)
    assert fake_client.clicked() == []

    await page.set_active_toggle(False)
    assert fake_client.clicked() == [str(CreateRoutineObjects.active_toggle)]


@pytest.mark.asyncio
async def test_verify_toggle_is_active(driver, fake_client):
    """Test switch values reported as 'true' and '0'."""
    toggle = fake_client.add(CreateRoutineObjects.active_toggle, attributes={"value": "true"})
    page = CreateRoutinePage(driver)
    await page.verify_toggle_is_active()

    toggle.attributes["value"] = "0"
    with pytest.raises(ScreenVerificationError, match="Current value: 0"):
        await page.verify_toggle_is_active()


@pytest.mark.asyncio
async def test_tap_create_refuses_disabled_button(driver, fake_client):
    """Test that an invalid form is reported instead of tapping."""
    fake_client.add(CreateRoutineObjects.label_active)
    fake_client.add(CreateRoutineObjects.create_button, enabled=False)

    with pytest.raises(ScreenVerificationError, match="disabled"):
        await CreateRoutinePage(driver).tap_create()
    assert fake_client.clicked() == [str(CreateRoutineObjects.label_active)]


@pytest.mark.asyncio
async def test_close_popup_tolerates_missing_popup(driver, fake_client):
    """Test automatic navigation without a success popup."""
    page = await CreateRoutinePage(driver).close_popup()

    assert isinstance(page, CreateRoutinePage)
    assert fake_client.clicked() == []


@pytest.mark.asyncio
async def test_fluent_create_routine_chain(driver, fake_client):
    """Test queuing form steps and running them with one await."""
    name_input = fake_client.add(CreateRoutineObjects.routine_name_input)
    description_input = fake_client.add(CreateRoutineObjects.routine_description_input)
    handle = create_fluent_create_routine_page(driver)

    handle.enter_routine_name("Push Day").enter_routine_description("Chest and triceps")
    assert fake_client.calls == []

    page = await handle.execute()

    assert isinstance(page, CreateRoutinePage)
    assert name_input.attributes["value"] == "Push Day"
    assert description_input.attributes["value"] == "Chest and triceps"


# -- Routine Detail / Manage Workout Day ------------------------------------------


def workout_day_form(fake_client, *muscle_group_ids):
    fake_client.add(ManageWorkoutDayObjects.day_number_input)
    fake_client.add(ManageWorkoutDayObjects.day_name_input)
    fake_client.add(ManageWorkoutDayObjects.notes_label)
    fake_client.add(ManageWorkoutDayObjects.first_muscle_group_container)
    fake_client.add(ManageWorkoutDayObjects.save_workout_day_button)
    for muscle_group_id in muscle_group_ids:
        fake_client.add(ManageWorkoutDayObjects.sets_input_for_muscle_group(muscle_group_id))


@pytest.mark.asyncio
async def test_add_workout_day_fills_form_and_saves(driver, fake_client):
    """Test adding a day with an explicit day number and two set specs."""
    fake_client.add(RoutineDetailObjects.add_workout_day_button)
    workout_day_form(fake_client, MuscleGroupId.CHEST, MuscleGroupId.TRICEPS)
    fake_client.alert_text = "Workout day saved"

    await RoutineDetailPage(driver).add_workout_day("Push", 2, "4 sets of chest", "3 sets of triceps")

    assert typed(fake_client) == [
        "accessibility id:day-number-input=2",
        "accessibility id:day-name-input=Push",
        "accessibility id:sets-input-1=4",
        "accessibility id:sets-input-5=3",
    ]
    assert fake_client.clicked()[0] == str(RoutineDetailObjects.add_workout_day_button)
    assert str(ManageWorkoutDayObjects.save_workout_day_button) in fake_client.clicked()
    assert ("accept_alert", "Workout day saved") in fake_client.calls


@pytest.mark.asyncio
async def test_add_workout_day_defaults_day_number(driver, fake_client):
    """Test that a set spec in second position means day number 1."""
    fake_client.add(RoutineDetailObjects.add_first_day_button)
    workout_day_form(fake_client, MuscleGroupId.QUADRICEPS)

    await RoutineDetailPage(driver).add_workout_day("Legs", "5 sets of quad")

    assert typed(fake_client)[0] == "accessibility id:day-number-input=1"
    assert typed(fake_client)[-1] == "accessibility id:sets-input-7=5"
    assert fake_client.clicked()[0] == str(RoutineDetailObjects.add_first_day_button)


@pytest.mark.asyncio
async def test_add_workout_day_rejects_bad_set_spec(driver, fake_client):
    """Test that malformed set specs fail before anything is saved."""
    fake_client.add(RoutineDetailObjects.add_workout_day_button)
    workout_day_form(fake_client)

    with pytest.raises(ValueError, match="Invalid set format"):
        await RoutineDetailPage(driver).add_workout_day("Push", 1, "chest please")
    assert str(ManageWorkoutDayObjects.save_workout_day_button) not in fake_client.clicked()


@pytest.mark.asyncio
async def test_edit_workout_day_set(driver, fake_client):
    """Test editing the sets of one muscle group on an existing day."""
    fake_client.add(RoutineDetailObjects.edit_button_for_day("Push"))
    workout_day_form(fake_client, MuscleGroupId.CHEST)

    await RoutineDetailPage(driver).edit_workout_day_set("Push", MuscleGroupId.CHEST, 6)

    assert fake_client.clicked()[0] == str(RoutineDetailObjects.edit_button_for_day("Push"))
    assert typed(fake_client) == ["accessibility id:sets-input-1=6"]


@pytest.mark.asyncio
async def test_verify_workout_day_set(driver, fake_client):
    """Test the muscle group summary on a day row."""
    fake_client.add(RoutineDetailObjects.muscle_group_container_for_day("Push", "Chest", 4))
    page = RoutineDetailPage(driver)

    await page.verify_workout_day_set("Push", "Chest", 4)
    with pytest.raises(ScreenVerificationError, match="does not show 6 sets of Chest"):
        await page.verify_workout_day_set("Push", "Chest", 6)


@pytest.mark.asyncio
async def test_snapshot_complete_without_toast(driver, fake_client):
    """Test that a vanished toast does not fail snapshot creation."""
    fake_client.add(RoutineDetailObjects.create_snapshot_button)
    page = RoutineDetailPage(driver)

    await page.tap_create_snapshot()
    await page.wait_for_snapshot_creation_complete()

    assert fake_client.clicked() == [str(RoutineDetailObjects.create_snapshot_button)]


# -- Manage Exercise ---------------------------------------------------------------


@pytest.mark.asyncio
async def test_enter_notes_is_optional(driver, fake_client):
    """Test that a build without a notes field is skipped silently."""
    page = await ManageExercisePage(driver).enter_notes("slow negatives")

    assert isinstance(page, ManageExercisePage)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_exercise_form_and_save_with_keyboard(driver, fake_client):
    """Test filling the exercise form and saving with the keyboard up."""
    for locator in (
        ManageExerciseObjects.exercise_name_input,
        ManageExerciseObjects.total_reps_input,
        ManageExerciseObjects.weight_input,
        ManageExerciseObjects.total_sets_input,
        ManageExerciseObjects.save_button,
    ):
        fake_client.add(locator)
    fake_client.keyboard_shown = True
    page = ManageExercisePage(driver)

    await page.enter_exercise_name("Bench Press")
    await page.enter_total_reps(30)
    await page.enter_weight(135.0)
    await page.enter_total_sets(3)
    await page.tap_save()

    assert typed(fake_client) == [
        "accessibility id:exercise-name-input=Bench Press",
        "accessibility id:total-reps-input=30",
        "accessibility id:weight-input=135",
        "accessibility id:total-sets-input=3",
    ]
    assert fake_client.keyboard_shown is False
    assert fake_client.clicked()[-1] == str(ManageExerciseObjects.save_button)


@pytest.mark.asyncio
async def test_tap_add_exercise_for_muscle_group(driver, fake_client):
    """Test the per-muscle-group add button."""
    fake_client.add(ManageExerciseObjects.add_exercise_button_for_muscle_group("Chest"))

    await ManageExercisePage(driver).tap_add_exercise_for_muscle_group("Chest")

    assert fake_client.clicked() == ["accessibility id:add-exercise-button-1"]


# -- Weekly Report -------------------------------------------------------------------


@pytest.mark.asyncio
async def test_report_in_error_state_fails_verification(driver, fake_client):
    """Test that an error container is not mistaken for a report."""
    fake_client.add(WeeklyReportObjects.weekly_report_screen)
    fake_client.add(WeeklyReportObjects.error_container)

    with pytest.raises(ScreenVerificationError, match="error state"):
        await WeeklyReportPage(driver).verify_report_displayed()


@pytest.mark.asyncio
async def test_verify_muscle_group_total(driver, fake_client):
    """Test the sets total inside a muscle group card."""
    fake_client.add(WeeklyReportObjects.muscle_group_by_name("Chest"))
    fake_client.add(WeeklyReportObjects.sets_text_for_muscle_group("Chest", 4))
    page = WeeklyReportPage(driver)

    await page.verify_muscle_group_total("Chest", 4)
    with pytest.raises(ScreenVerificationError, match="Chest does not show 5 sets"):
        await page.verify_muscle_group_total("Chest", 5)


@pytest.mark.asyncio
async def test_verify_exercise_totals(driver, fake_client):
    """Test exercise total rows and their count."""
    fake_client.add(WeeklyReportObjects.exercise_totals_section)
    fake_client.add(WeeklyReportObjects.exercise_total_by_name("Bench Press"))
    fake_client.add(WeeklyReportObjects.total_reps_text("Bench Press", 30))
    fake_client.add(WeeklyReportObjects.total_weight_text("Bench Press", 135.0))
    fake_client.add(WeeklyReportObjects.exercise_totals)
    fake_client.add(WeeklyReportObjects.exercise_totals)
    page = WeeklyReportPage(driver)

    await page.verify_exercise_total_displayed("Bench Press", 30, 135.0)
    await page.verify_exercise_totals_count(2)
    with pytest.raises(ScreenVerificationError, match="Expected 3 exercise total"):
        await page.verify_exercise_totals_count(3)


@pytest.mark.asyncio
async def test_fluent_report_chain_stops_at_failure(driver, fake_client):
    """Test that a failed verification skips the queued back tap."""
    fake_client.add(WeeklyReportObjects.back_button)
    handle = create_fluent_weekly_report_page(driver)

    with pytest.raises(ScreenVerificationError):
        await handle.verify_empty_state().tap_back().execute()
    assert fake_client.clicked() == []


# -- Page base -------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_capture_dom_tree_writes_xml(driver, fake_client, tmp_path):
    """Test the DOM capture file name and content."""
    path = await MyRoutinesPage(driver, artifacts_dir=tmp_path).capture_dom_tree("my routines")

    assert path.parent == tmp_path / "dom-captures"
    assert path.name.startswith("dom-tree-my_routines-")
    assert path.read_text(encoding="utf-8") == fake_client.page_source
