"""Project ORM — named container that owns its calculations.

Invariants:
    - id is an integer identity assigned by the store
    - name is non-nullable (emptiness rejected at the API boundary)
    - calculations ordered by id

Design Decisions:
    - cascade delete for calculations: deleting a project removes its calculations
    - lazy="selectin": collection is loaded with the project, no lazy IO in async context
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from calculator.db.base import Base


class Project(Base):
    """Project aggregate root — owns all calculations."""
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    calculations: Mapped[list["Calculation"]] = relationship(
        "Calculation", back_populates="project",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Calculation.id",
    )
