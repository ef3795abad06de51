import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from datetime import datetime  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from lesson_planner.api.deps import get_db  # noqa: E402
from lesson_planner.db.base import Base  # noqa: E402
from lesson_planner.main import app  # noqa: E402
from lesson_planner.models import Grade, LessonPlan, Semester, Subject  # noqa: E402
from lesson_planner.services import ContentGenerator  # noqa: E402

# In-memory SQLite, one fresh database per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Deterministic id factory: "1", "2", "3", ..."""
    counter = count(1)
    return lambda: str(next(counter))


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create all tables before the test and drop them after."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing endpoints."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def add_lesson_plan(db_session: AsyncSession) -> Callable:
    """Insert a generated lesson plan directly, with an explicit creation time."""
    generator = ContentGenerator()

    async def _add(
        created_at: datetime,
        subject: Subject = Subject.MATEMATIKA,
        grade: Grade = Grade.SMA_10,
        semester: Semester = Semester.FIRST,
        material: str = "Aljabar Linear",
    ) -> LessonPlan:
        content = generator.generate(subject, material, grade, semester)
        lesson_plan = LessonPlan(
            subject=subject.value,
            material=material,
            grade=grade.value,
            semester=semester.value,
            created_at=created_at,
            updated_at=created_at,
            **content.to_dict(),
        )
        db_session.add(lesson_plan)
        await db_session.flush()
        return lesson_plan

    return _add
