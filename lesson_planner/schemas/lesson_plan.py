from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from lesson_planner.models import (
    AssessmentType,
    Grade,
    LessonPlan,
    MaterialType,
    ReferenceType,
    Semester,
    Subject,
)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class LearningObjective(BaseModel):
    id: str
    description: str
    indicator: str


class TeachingMethod(BaseModel):
    name: str
    description: str
    duration_minutes: int = Field(ge=1)


class MaterialTool(BaseModel):
    name: str
    type: MaterialType
    description: str | None = None


class LearningActivity(BaseModel):
    step: int = Field(ge=1)
    activity: str
    duration_minutes: int = Field(ge=1)
    description: str


class Assessment(BaseModel):
    type: AssessmentType
    method: str
    description: str
    criteria: str


class Reference(BaseModel):
    title: str
    author: str | None = None
    url: str | None = None
    type: ReferenceType


def validate_material(value: str) -> str:
    """Strip the topic label and reject blank values."""
    value = value.strip()
    if not value:
        raise ValueError("Material must not be empty")
    return value


def validate_activity_steps(activities: list[LearningActivity]) -> list[LearningActivity]:
    """Steps must run 1, 2, ..., n in order."""
    for expected, activity in enumerate(activities, start=1):
        if activity.step != expected:
            raise ValueError(f"Activity steps must be consecutive from 1, got {activity.step} at position {expected}")
    return activities


class GeneratedContent(BaseModel):
    """Content blocks derived for a new lesson plan."""

    learning_objectives: list[LearningObjective]
    teaching_methods: list[TeachingMethod]
    materials_tools: list[MaterialTool]
    learning_activities: list[LearningActivity]
    assessments: list[Assessment]
    references: list[Reference]
    total_duration_minutes: int = Field(ge=1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-compatible column values."""
        return self.model_dump(mode="json", exclude_none=True)


class LessonPlanCreate(BaseModel):
    """Schema for creating a new lesson plan."""

    subject: Subject
    material: str = Field(..., min_length=1)
    grade: Grade
    semester: Semester

    @field_validator("material")
    @classmethod
    def check_material(cls, v: str) -> str:
        return validate_material(v)


class LessonPlanUpdate(BaseModel):
    """Schema for updating a lesson plan. Only the fields sent are applied."""

    subject: Subject | None = None
    material: str | None = Field(None, min_length=1)
    grade: Grade | None = None
    semester: Semester | None = None
    learning_objectives: list[LearningObjective] | None = Field(None, min_length=1)
    teaching_methods: list[TeachingMethod] | None = Field(None, min_length=1)
    materials_tools: list[MaterialTool] | None = Field(None, min_length=1)
    learning_activities: list[LearningActivity] | None = Field(None, min_length=1)
    assessments: list[Assessment] | None = Field(None, min_length=1)
    references: list[Reference] | None = Field(None, min_length=1)
    total_duration_minutes: int | None = Field(None, ge=1)

    @field_validator("material")
    @classmethod
    def check_material(cls, v: str | None) -> str | None:
        return v if v is None else validate_material(v)

    @field_validator("learning_activities")
    @classmethod
    def check_activity_steps(cls, v: list[LearningActivity] | None) -> list[LearningActivity] | None:
        return v if v is None else validate_activity_steps(v)

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "LessonPlanUpdate":
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be set to null: {', '.join(nulls)}")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return only the fields present in the request, as column values."""
        return self.model_dump(mode="json", exclude_unset=True)


class LessonPlanFilters(BaseModel):
    """Query parameters for listing lesson plans."""

    subject: Subject | None = None
    grade: Grade | None = None
    semester: Semester | None = None
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    offset: int = Field(0, ge=0)


class LessonPlanResponse(BaseModel):
    """Response model for lesson plan endpoints."""

    id: str
    subject: Subject
    material: str
    grade: Grade
    semester: Semester
    learning_objectives: list[LearningObjective]
    teaching_methods: list[TeachingMethod]
    materials_tools: list[MaterialTool]
    learning_activities: list[LearningActivity]
    assessments: list[Assessment]
    references: list[Reference]
    total_duration_minutes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_models(cls, lesson_plan: LessonPlan) -> "LessonPlanResponse":
        return LessonPlanResponse(
            id=lesson_plan.id,
            subject=lesson_plan.subject,
            material=lesson_plan.material,
            grade=lesson_plan.grade,
            semester=lesson_plan.semester,
            learning_objectives=lesson_plan.learning_objectives,
            teaching_methods=lesson_plan.teaching_methods,
            materials_tools=lesson_plan.materials_tools,
            learning_activities=lesson_plan.learning_activities,
            assessments=lesson_plan.assessments,
            references=lesson_plan.references,
            total_duration_minutes=lesson_plan.total_duration_minutes,
            created_at=lesson_plan.created_at,
            updated_at=lesson_plan.updated_at,
        )


class LessonPlansTotalResponse(BaseModel):
    """Response model for a page of lesson plans."""

    lesson_plans: list[LessonPlanResponse]
    total: int


class LessonPlanDeleteResponse(BaseModel):
    deleted: bool
