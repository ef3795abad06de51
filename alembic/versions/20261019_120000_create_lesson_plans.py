"""create_lesson_plans

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

json_list = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "lesson_plans",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("subject", sa.String(length=32), nullable=False),
        sa.Column("material", sa.Text(), nullable=False),
        sa.Column("grade", sa.String(length=16), nullable=False),
        sa.Column("semester", sa.String(length=1), nullable=False),
        sa.Column("learning_objectives", json_list, nullable=False),
        sa.Column("teaching_methods", json_list, nullable=False),
        sa.Column("materials_tools", json_list, nullable=False),
        sa.Column("learning_activities", json_list, nullable=False),
        sa.Column("assessments", json_list, nullable=False),
        sa.Column("references", json_list, nullable=False),
        sa.Column("total_duration_minutes", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_lesson_plans")),
    )
    # Index names follow the metadata naming convention (ix_%(column_0_label)s)
    op.create_index(op.f("ix_lesson_plans_created_at"), "lesson_plans", ["created_at"])
    op.create_index(op.f("ix_lesson_plans_subject"), "lesson_plans", ["subject"])
    op.create_index(op.f("ix_lesson_plans_grade"), "lesson_plans", ["grade"])
    op.create_index(op.f("ix_lesson_plans_semester"), "lesson_plans", ["semester"])


def downgrade() -> None:
    op.drop_index(op.f("ix_lesson_plans_semester"), table_name="lesson_plans")
    op.drop_index(op.f("ix_lesson_plans_grade"), table_name="lesson_plans")
    op.drop_index(op.f("ix_lesson_plans_subject"), table_name="lesson_plans")
    op.drop_index(op.f("ix_lesson_plans_created_at"), table_name="lesson_plans")
    op.drop_table("lesson_plans")
