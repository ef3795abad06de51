from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from lesson_planner.api.deps import LessonPlans
from lesson_planner.schemas import (
    ErrorResponse,
    LessonPlanCreate,
    LessonPlanDeleteResponse,
    LessonPlanFilters,
    LessonPlanResponse,
    LessonPlansTotalResponse,
    LessonPlanUpdate,
)

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post("", response_model=LessonPlanResponse, status_code=status.HTTP_201_CREATED)
async def create_lesson_plan(
    service: LessonPlans,
    lesson_plan: LessonPlanCreate,
) -> LessonPlanResponse:
    """
    Create a new lesson plan.

    Objectives, methods, materials, activities, assessments, references and
    the total duration are generated from subject, material, grade and semester.
    """
    created = await service.create_lesson_plan(lesson_plan)
    return LessonPlanResponse.from_models(created)


@router.get("", response_model=LessonPlansTotalResponse)
async def get_lesson_plans(
    service: LessonPlans,
    filters: Annotated[LessonPlanFilters, Query()],
) -> LessonPlansTotalResponse:
    """List lesson plans, newest first, optionally filtered by subject, grade and semester."""
    lesson_plans = await service.get_lesson_plans(filters)
    return LessonPlansTotalResponse(
        total=len(lesson_plans),
        lesson_plans=[LessonPlanResponse.from_models(lesson_plan) for lesson_plan in lesson_plans],
    )


@router.get("/{lesson_plan_id}", response_model=LessonPlanResponse, responses=NOT_FOUND_RESPONSE)
async def get_lesson_plan(
    service: LessonPlans,
    lesson_plan_id: str,
) -> LessonPlanResponse:
    """Get lesson plan by ID."""
    lesson_plan = await service.get_lesson_plan(lesson_plan_id)
    if not lesson_plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Lesson plan with id {lesson_plan_id} not found",
        )
    return LessonPlanResponse.from_models(lesson_plan)


@router.patch("/{lesson_plan_id}", response_model=LessonPlanResponse, responses=NOT_FOUND_RESPONSE)
async def update_lesson_plan(
    service: LessonPlans,
    lesson_plan_id: str,
    lesson_plan: LessonPlanUpdate,
) -> LessonPlanResponse:
    """Update the given fields of an existing lesson plan."""
    try:
        updated = await service.update_lesson_plan(lesson_plan_id, lesson_plan)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Lesson plan with id {lesson_plan_id} does not exist",
        )
    return LessonPlanResponse.from_models(updated)


@router.delete("/{lesson_plan_id}", response_model=LessonPlanDeleteResponse)
async def delete_lesson_plan(
    service: LessonPlans,
    lesson_plan_id: str,
) -> LessonPlanDeleteResponse:
    """Delete a lesson plan. ``deleted`` is false when no such lesson plan existed."""
    deleted = await service.delete_lesson_plan(lesson_plan_id)
    return LessonPlanDeleteResponse(deleted=deleted)
