"""
Selectors for each screen. No actions live here; page classes own behaviour.
"""

from .create_routine import CreateRoutineObjects
from .manage_exercise import ManageExerciseObjects
from .manage_workout_day import ManageWorkoutDayObjects
from .my_routines import MyRoutinesObjects
from .routine_detail import RoutineDetailObjects
from .routine_list import RoutineListObjects
from .weekly_report import WeeklyReportObjects

__all__ = [
    "CreateRoutineObjects",
    "ManageExerciseObjects",
    "ManageWorkoutDayObjects",
    "MyRoutinesObjects",
    "RoutineDetailObjects",
    "RoutineListObjects",
    "WeeklyReportObjects",
]
