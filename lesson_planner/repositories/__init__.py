from lesson_planner.repositories.base import BaseRepository
from lesson_planner.repositories.lesson_plan import LessonPlanRepository

__all__ = [
    "BaseRepository",
    "LessonPlanRepository",
]
