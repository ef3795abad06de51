from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lesson_planner.db.session import async_session_factory
from lesson_planner.services import LessonPlanService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides an async database session.

    Handles commit on success and rollback on exception.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# Type alias for cleaner dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]


def get_lesson_plan_service(db: DatabaseSession) -> LessonPlanService:
    """Dependency that provides a lesson plan service bound to the request session."""
    return LessonPlanService(db)


LessonPlans = Annotated[LessonPlanService, Depends(get_lesson_plan_service)]
