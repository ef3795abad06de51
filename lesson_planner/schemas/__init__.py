from lesson_planner.schemas.lesson_plan import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Assessment,
    GeneratedContent,
    LearningActivity,
    LearningObjective,
    LessonPlanCreate,
    LessonPlanDeleteResponse,
    LessonPlanFilters,
    LessonPlanResponse,
    LessonPlansTotalResponse,
    LessonPlanUpdate,
    MaterialTool,
    Reference,
    TeachingMethod,
)
from lesson_planner.schemas.response import ErrorDetail, ErrorResponse

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "Assessment",
    "GeneratedContent",
    "LearningActivity",
    "LearningObjective",
    "LessonPlanCreate",
    "LessonPlanDeleteResponse",
    "LessonPlanFilters",
    "LessonPlanResponse",
    "LessonPlansTotalResponse",
    "LessonPlanUpdate",
    "MaterialTool",
    "Reference",
    "TeachingMethod",
    "ErrorDetail",
    "ErrorResponse",
]
