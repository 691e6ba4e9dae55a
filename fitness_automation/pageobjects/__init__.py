"""
Page objects for the fitness app.

Selectors live in `objects`; each page class owns the actions for its screen.
Actions are async and return the page, so they can be chained on a fluent proxy.
"""

from .create_routine import CreateRoutinePage, create_fluent_create_routine_page
from .manage_exercise import ManageExercisePage, create_fluent_manage_exercise_page
from .manage_workout_day import ManageWorkoutDayPage, create_fluent_manage_workout_day_page
from .my_routines import MyRoutinesPage, create_fluent_my_routines_page
from .page import Page, ScreenVerificationError
from .routine_detail import RoutineDetailPage, create_fluent_routine_detail_page
from .weekly_report import WeeklyReportPage, create_fluent_weekly_report_page

__all__ = [
    "CreateRoutinePage",
    "ManageExercisePage",
    "ManageWorkoutDayPage",
    "MyRoutinesPage",
    "Page",
    "RoutineDetailPage",
    "ScreenVerificationError",
    "WeeklyReportPage",
    "create_fluent_create_routine_page",
    "create_fluent_manage_exercise_page",
    "create_fluent_manage_workout_day_page",
    "create_fluent_my_routines_page",
    "create_fluent_routine_detail_page",
    "create_fluent_weekly_report_page",
]
