from datetime import datetime, timedelta
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from lesson_planner.db.base import Base, utc_now

ModelType = TypeVar("ModelType", bound=Base)


def next_timestamp(previous: datetime | None) -> datetime:
    """Current UTC time, forced strictly after ``previous``."""
    now = utc_now()
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing common CRUD operations.

    Inherit from this class and specify the model type:
        class LessonPlanRepository(BaseRepository[LessonPlan]):
            def __init__(self, session: AsyncSession):
                super().__init__(LessonPlan, session)
    """

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def get_by_id(self, id: str) -> ModelType | None:
        """Get a single record by ID."""
        if not id:
            return None
        return await self.session.get(self.model, id)

    async def create(self, obj_data: dict) -> ModelType:
        """Create a new record."""
        db_obj = self.model(**obj_data)
        self.session.add(db_obj)
        await self.session.flush()
        await self.session.refresh(db_obj)
        return db_obj

    async def update(
        self, db_obj: ModelType, update_data: dict
    ) -> ModelType:
        """Update an existing record. updated_at is bumped even when nothing else changes."""
        for field, value in update_data.items():
            if value is not None:
                setattr(db_obj, field, value)
        db_obj.updated_at = next_timestamp(db_obj.updated_at)
        await self.session.flush()
        await self.session.refresh(db_obj)
        return db_obj

    async def delete(self, db_obj: ModelType) -> None:
        """Delete a record."""
        await self.session.delete(db_obj)
        await self.session.flush()
