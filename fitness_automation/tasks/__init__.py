"""
Business operations composed from page objects.

Tasks absorb UI variations (popups, keyboard, navigation delays) so journeys
read as a list of user intents.
"""

from .routine import RoutineTasks
from .weekly_report import WeeklyReportTasks
from .workout_day import WorkoutDayTasks

__all__ = ["RoutineTasks", "WeeklyReportTasks", "WorkoutDayTasks"]
