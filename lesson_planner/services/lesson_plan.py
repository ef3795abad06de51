import logging
from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from lesson_planner.core import logs
from lesson_planner.models import LessonPlan
from lesson_planner.repositories import LessonPlanRepository
from lesson_planner.schemas import (
    LearningActivity,
    LessonPlanCreate,
    LessonPlanFilters,
    LessonPlanUpdate,
    TeachingMethod,
)
from lesson_planner.services.content_generator import ContentGenerator, calculate_total_duration
from lesson_planner.utils import new_id

logger = logging.getLogger(__name__)

DURATION_FIELDS = {"learning_activities", "teaching_methods", "total_duration_minutes"}


class LessonPlanService:
    """
    Service layer for lesson plan business logic.

    Generates content on creation and orchestrates repository calls.
    Storage errors are not caught here.
    """

    def __init__(
        self,
        session: AsyncSession,
        generator: ContentGenerator | None = None,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self.repository = LessonPlanRepository(session)
        self.generator = generator or ContentGenerator(id_factory)
        self.id_factory = id_factory

    async def create_lesson_plan(self, data: LessonPlanCreate) -> LessonPlan:
        """Generate content for the request and store the new lesson plan."""
        content = self.generator.generate(data.subject, data.material, data.grade, data.semester)
        lesson_plan = await self.repository.create({
            "id": self.id_factory(),
            "subject": data.subject.value,
            "material": data.material,
            "grade": data.grade.value,
            "semester": data.semester.value,
            **content.to_dict(),
        })
        logger.info(logs.LESSON_PLAN_CREATED, lesson_plan.id, data.subject.value, data.grade.value, data.semester.value)
        return lesson_plan

    async def get_lesson_plan(self, lesson_plan_id: str) -> LessonPlan | None:
        """Get a lesson plan by ID."""
        return await self.repository.get_by_id(lesson_plan_id)

    async def get_lesson_plans(self, filters: LessonPlanFilters) -> list[LessonPlan]:
        """Get a page of lesson plans, newest first."""
        return await self.repository.get_filtered(
            subject=filters.subject,
            grade=filters.grade,
            semester=filters.semester,
            skip=filters.offset,
            limit=filters.limit,
        )

    async def update_lesson_plan(self, lesson_plan_id: str, data: LessonPlanUpdate) -> LessonPlan | None:
        """
        Apply the fields present in ``data`` to an existing lesson plan.

        Returns None when the lesson plan does not exist. Raises ValueError
        when the result would be shorter than its activities or methods.
        """
        lesson_plan = await self.repository.get_by_id(lesson_plan_id)
        if not lesson_plan:
            logger.info(logs.LESSON_PLAN_NOT_FOUND, lesson_plan_id)
            return None

        update_dict = data.to_dict()
        if update_dict.keys() & DURATION_FIELDS:
            try:
                self._check_total_duration(lesson_plan, update_dict)
            except ValueError as e:
                logger.info(logs.LESSON_PLAN_UPDATE_REJECTED, lesson_plan_id, e)
                raise

        updated = await self.repository.update(lesson_plan, update_dict)
        logger.info(logs.LESSON_PLAN_UPDATED, lesson_plan_id, sorted(update_dict))
        return updated

    async def delete_lesson_plan(self, lesson_plan_id: str) -> bool:
        """Delete a lesson plan. Returns False if it did not exist."""
        lesson_plan = await self.repository.get_by_id(lesson_plan_id)
        if not lesson_plan:
            logger.info(logs.LESSON_PLAN_NOT_FOUND, lesson_plan_id)
            return False
        await self.repository.delete(lesson_plan)
        logger.info(logs.LESSON_PLAN_DELETED, lesson_plan_id)
        return True

    @staticmethod
    def _check_total_duration(lesson_plan: LessonPlan, update_dict: dict) -> None:
        activities = update_dict.get("learning_activities", lesson_plan.learning_activities)
        methods = update_dict.get("teaching_methods", lesson_plan.teaching_methods)
        total = update_dict.get("total_duration_minutes", lesson_plan.total_duration_minutes)

        required = calculate_total_duration(
            [LearningActivity.model_validate(activity) for activity in activities],
            [TeachingMethod.model_validate(method) for method in methods],
        )
        if total < required:
            raise ValueError(
                f"Total duration {total} is shorter than the activities or teaching methods ({required} minutes)"
            )
