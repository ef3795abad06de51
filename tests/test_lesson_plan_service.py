"""Tests for LessonPlanService against an in-memory database."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lesson_planner.models import Grade, Semester, Subject
from lesson_planner.schemas import LessonPlanCreate, LessonPlanFilters, LessonPlanUpdate
from lesson_planner.services import ContentGenerator, LessonPlanService

BASE_TIME = datetime(2026, 1, 5, 8, 0, tzinfo=UTC)


@pytest.fixture
def service(db_session: AsyncSession, sequential_ids) -> LessonPlanService:
    return LessonPlanService(db_session, id_factory=sequential_ids)


@pytest.fixture
def create_data() -> LessonPlanCreate:
    return LessonPlanCreate(
        subject=Subject.MATEMATIKA,
        material="  Aljabar Linear ",
        grade=Grade.SMA_10,
        semester=Semester.FIRST,
    )


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_generates_and_stores(self, service: LessonPlanService, create_data: LessonPlanCreate):
        lesson_plan = await service.create_lesson_plan(create_data)

        assert lesson_plan.material == "Aljabar Linear"
        assert lesson_plan.subject == "Matematika"
        assert lesson_plan.grade == "10 SMA"
        assert lesson_plan.semester == "1"
        assert len(lesson_plan.learning_activities) == 5
        assert lesson_plan.total_duration_minutes == 80
        assert lesson_plan.created_at.tzinfo is not None

        stored = await service.get_lesson_plan(lesson_plan.id)
        assert stored is not None
        assert stored.learning_objectives == lesson_plan.learning_objectives

    @pytest.mark.asyncio
    async def test_ids_come_from_factory(self, service: LessonPlanService, create_data: LessonPlanCreate):
        lesson_plan = await service.create_lesson_plan(create_data)

        # Objective ids are drawn first, the record id last
        assert [o["id"] for o in lesson_plan.learning_objectives] == ["obj-1", "obj-2", "obj-3"]
        assert lesson_plan.id == "4"

    @pytest.mark.asyncio
    async def test_injected_generator(self, db_session: AsyncSession, sequential_ids, create_data: LessonPlanCreate):
        service = LessonPlanService(
            db_session, generator=ContentGenerator(lambda: "fixed"), id_factory=sequential_ids
        )

        lesson_plan = await service.create_lesson_plan(create_data)

        assert [o["id"] for o in lesson_plan.learning_objectives] == ["obj-fixed"] * 3
        assert lesson_plan.id == "1"

    @pytest.mark.asyncio
    async def test_storage_error_propagates(
        self, service: LessonPlanService, create_data: LessonPlanCreate, db_session: AsyncSession, monkeypatch
    ):
        async def failing_flush(*args, **kwargs):
            raise OperationalError("INSERT", {}, Exception("database is gone"))

        monkeypatch.setattr(db_session, "flush", failing_flush)

        with pytest.raises(SQLAlchemyError):
            await service.create_lesson_plan(create_data)


class TestGet:
    @pytest.mark.asyncio
    async def test_missing_returns_none(self, service: LessonPlanService):
        assert await service.get_lesson_plan("does-not-exist") is None
        assert await service.get_lesson_plan("") is None


class TestUpdate:
    @pytest.mark.asyncio
    async def test_only_given_fields_change(self, service: LessonPlanService, create_data: LessonPlanCreate):
        lesson_plan = await service.create_lesson_plan(create_data)
        before_methods = list(lesson_plan.teaching_methods)
        created_at = lesson_plan.created_at

        updated = await service.update_lesson_plan(
            lesson_plan.id, LessonPlanUpdate(subject=Subject.FISIKA, material="Vektor")
        )

        assert updated is not None
        assert updated.subject == "Fisika"
        assert updated.material == "Vektor"
        assert updated.grade == "10 SMA"
        assert updated.teaching_methods == before_methods
        assert updated.total_duration_minutes == 80
        assert updated.created_at == created_at

    @pytest.mark.asyncio
    async def test_updated_at_strictly_increases(self, service: LessonPlanService, create_data: LessonPlanCreate):
        lesson_plan = await service.create_lesson_plan(create_data)
        previous = lesson_plan.updated_at

        for data in (LessonPlanUpdate(material="Matriks"), LessonPlanUpdate(), LessonPlanUpdate()):
            updated = await service.update_lesson_plan(lesson_plan.id, data)
            assert updated.updated_at > previous
            previous = updated.updated_at

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, service: LessonPlanService):
        assert await service.update_lesson_plan("nope", LessonPlanUpdate(material="X")) is None

    @pytest.mark.asyncio
    async def test_total_shorter_than_activities_is_rejected(
        self, service: LessonPlanService, create_data: LessonPlanCreate
    ):
        lesson_plan = await service.create_lesson_plan(create_data)

        with pytest.raises(ValueError):
            await service.update_lesson_plan(lesson_plan.id, LessonPlanUpdate(total_duration_minutes=60))

        stored = await service.get_lesson_plan(lesson_plan.id)
        assert stored.total_duration_minutes == 80

    @pytest.mark.asyncio
    async def test_longer_methods_need_longer_total(self, service: LessonPlanService, create_data: LessonPlanCreate):
        lesson_plan = await service.create_lesson_plan(create_data)
        long_methods = [{"name": "Project Work", "description": "Build a model", "duration_minutes": 120}]

        with pytest.raises(ValueError):
            await service.update_lesson_plan(lesson_plan.id, LessonPlanUpdate(teaching_methods=long_methods))

        updated = await service.update_lesson_plan(
            lesson_plan.id, LessonPlanUpdate(teaching_methods=long_methods, total_duration_minutes=120)
        )
        assert updated.total_duration_minutes == 120
        assert updated.teaching_methods == long_methods

    @pytest.mark.asyncio
    async def test_longer_total_is_allowed(self, service: LessonPlanService, create_data: LessonPlanCreate):
        lesson_plan = await service.create_lesson_plan(create_data)

        updated = await service.update_lesson_plan(lesson_plan.id, LessonPlanUpdate(total_duration_minutes=90))

        assert updated.total_duration_minutes == 90


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_once(self, service: LessonPlanService, create_data: LessonPlanCreate):
        lesson_plan = await service.create_lesson_plan(create_data)

        assert await service.delete_lesson_plan(lesson_plan.id) is True
        assert await service.delete_lesson_plan(lesson_plan.id) is False
        assert await service.get_lesson_plan(lesson_plan.id) is None

    @pytest.mark.asyncio
    async def test_unknown_and_empty_ids(self, service: LessonPlanService):
        assert await service.delete_lesson_plan("unknown") is False
        assert await service.delete_lesson_plan("") is False


class TestList:
    @pytest.mark.asyncio
    async def test_newest_first(self, service: LessonPlanService, add_lesson_plan):
        oldest = await add_lesson_plan(BASE_TIME)
        newest = await add_lesson_plan(BASE_TIME + timedelta(hours=2))
        middle = await add_lesson_plan(BASE_TIME + timedelta(hours=1))

        lesson_plans = await service.get_lesson_plans(LessonPlanFilters())

        assert [lp.id for lp in lesson_plans] == [newest.id, middle.id, oldest.id]

    @pytest.mark.asyncio
    async def test_filters_match_exactly(self, service: LessonPlanService, add_lesson_plan):
        match = await add_lesson_plan(BASE_TIME, subject=Subject.IPA, grade=Grade.SD_4, semester=Semester.SECOND)
        await add_lesson_plan(BASE_TIME, subject=Subject.IPA, grade=Grade.SD_4, semester=Semester.FIRST)
        await add_lesson_plan(BASE_TIME, subject=Subject.IPS, grade=Grade.SD_4, semester=Semester.SECOND)
        await add_lesson_plan(BASE_TIME, subject=Subject.IPA, grade=Grade.SMP_7, semester=Semester.SECOND)

        by_all = await service.get_lesson_plans(
            LessonPlanFilters(subject=Subject.IPA, grade=Grade.SD_4, semester=Semester.SECOND)
        )
        by_subject = await service.get_lesson_plans(LessonPlanFilters(subject=Subject.IPA))

        assert [lp.id for lp in by_all] == [match.id]
        assert len(by_subject) == 3
        assert all(lp.subject == "IPA" for lp in by_subject)

    @pytest.mark.asyncio
    async def test_pages_are_disjoint_and_contiguous(self, service: LessonPlanService, add_lesson_plan):
        for minutes in range(7):
            await add_lesson_plan(BASE_TIME + timedelta(minutes=minutes))

        everything = await service.get_lesson_plans(LessonPlanFilters(limit=100))
        pages = [
            await service.get_lesson_plans(LessonPlanFilters(limit=3, offset=offset))
            for offset in (0, 3, 6)
        ]

        assert [len(page) for page in pages] == [3, 3, 1]
        assert [lp.id for page in pages for lp in page] == [lp.id for lp in everything]

    @pytest.mark.asyncio
    async def test_offset_past_end(self, service: LessonPlanService, add_lesson_plan):
        await add_lesson_plan(BASE_TIME)

        assert await service.get_lesson_plans(LessonPlanFilters(offset=5)) == []
