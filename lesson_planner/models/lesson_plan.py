from sqlalchemy import JSON, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from lesson_planner.db.base import Base
from lesson_planner.models.enums import Grade, Semester, Subject

# JSONB on PostgreSQL, plain JSON on other backends (tests run on SQLite)
JSONList = JSON().with_variant(JSONB(), "postgresql")


class LessonPlan(Base):
    """Lesson plan with its generated pedagogical content."""

    __tablename__ = "lesson_plans"

    subject: Mapped[Subject] = mapped_column(String(32), nullable=False, index=True)
    material: Mapped[str] = mapped_column(Text, nullable=False)
    grade: Mapped[Grade] = mapped_column(String(16), nullable=False, index=True)
    semester: Mapped[Semester] = mapped_column(String(1), nullable=False, index=True)

    # Ordered lists of plain dicts, shaped by the schemas in lesson_planner.schemas
    learning_objectives: Mapped[list] = mapped_column(JSONList, nullable=False)
    teaching_methods: Mapped[list] = mapped_column(JSONList, nullable=False)
    materials_tools: Mapped[list] = mapped_column(JSONList, nullable=False)
    learning_activities: Mapped[list] = mapped_column(JSONList, nullable=False)
    assessments: Mapped[list] = mapped_column(JSONList, nullable=False)
    references: Mapped[list] = mapped_column(JSONList, nullable=False)

    total_duration_minutes: Mapped[int] = mapped_column(nullable=False)

    def __repr__(self) -> str:
        return f"<LessonPlan(id={self.id}, subject='{self.subject}', material='{self.material}')>"
