"""Calculation ORM — an arithmetic expression and its last evaluated result.

Invariants:
    - Always belongs to a Project (project_id FK, ON DELETE CASCADE)
    - expression is non-nullable text
    - result is null until a result endpoint evaluates the expression

Design Decisions:
    - result stored, not computed on read: listing stays cheap, result endpoints refresh it
"""

from sqlalchemy import Integer, String, Text, Float, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from calculator.db.base import Base


class Calculation(Base):
    """Calculation entity — expression scoped to one project."""
    __tablename__ = "calculations"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    expression: Mapped[str] = mapped_column(String(1000), nullable=False)
    result: Mapped[float | None] = mapped_column(Float, nullable=True)

    project: Mapped["Project"] = relationship(
        "Project", back_populates="calculations",
    )
