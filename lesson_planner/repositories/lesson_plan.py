from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lesson_planner.models import Grade, LessonPlan, Semester, Subject
from lesson_planner.repositories.base import BaseRepository


class LessonPlanRepository(BaseRepository[LessonPlan]):
    """Repository for LessonPlan-specific database operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(LessonPlan, session)

    async def get_filtered(
        self,
        subject: Subject | None = None,
        grade: Grade | None = None,
        semester: Semester | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> list[LessonPlan]:
        """Get lesson plans matching every given filter exactly, newest first."""
        conditions = []
        if subject is not None:
            conditions.append(LessonPlan.subject == subject.value)
        if grade is not None:
            conditions.append(LessonPlan.grade == grade.value)
        if semester is not None:
            conditions.append(LessonPlan.semester == semester.value)

        query = (
            select(LessonPlan)
            .where(*conditions)
            .order_by(LessonPlan.created_at.desc(), LessonPlan.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
