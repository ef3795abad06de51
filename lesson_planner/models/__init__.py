from lesson_planner.models.enums import (
    GRADE_TIERS,
    AssessmentType,
    Grade,
    MaterialType,
    ReferenceType,
    Semester,
    Subject,
    Tier,
)
from lesson_planner.models.lesson_plan import LessonPlan

__all__ = [
    "LessonPlan",
    "Subject",
    "Grade",
    "Semester",
    "Tier",
    "GRADE_TIERS",
    "MaterialType",
    "AssessmentType",
    "ReferenceType",
]
