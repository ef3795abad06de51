from lesson_planner.services.content_generator import ContentGenerator, calculate_total_duration
from lesson_planner.services.lesson_plan import LessonPlanService

__all__ = [
    "ContentGenerator",
    "LessonPlanService",
    "calculate_total_duration",
]
