"""Initial schema — projects and calculations.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "calculations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "project_id", sa.Integer,
            sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("expression", sa.String(1000), nullable=False),
        sa.Column("result", sa.Float, nullable=True),
    )
    op.create_index(
        "ix_calculations_project_id", "calculations", ["project_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_calculations_project_id", table_name="calculations")
    op.drop_table("calculations")
    op.drop_table("projects")
