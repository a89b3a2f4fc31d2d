"""SQLAlchemy Repositories — ProjectRepository / CalculationRepository over an AsyncSession.

Invariants:
    - Each mutating call commits (one unit of work per repository call)
    - find_* never raise for absence — they return None or []
    - Scoped lookups always filter on project_id

Design Decisions:
    - Repositories own commit, services own existence checks
    - Results ordered by id so listings are stable across databases
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from calculator.core.domain_types import ProjectId, CalculationId
from calculator.models.calculation import Calculation
from calculator.models.project import Project


class SqlAlchemyProjectRepository:
    """ProjectRepository backed by the relational store."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> list[Project]:
        result = await self._db.execute(select(Project).order_by(Project.id))
        return list(result.scalars().all())

    async def find_by_id(self, project_id: ProjectId) -> Project | None:
        result = await self._db.execute(
            select(Project).where(Project.id == project_id),
        )
        return result.scalar_one_or_none()

    async def save(self, project: Project) -> Project:
        self._db.add(project)
        await self._db.commit()
        return project

    async def delete_by_id(self, project_id: ProjectId) -> None:
        project = await self.find_by_id(project_id)
        if project is None:
            return
        await self._db.delete(project)
        await self._db.commit()


class SqlAlchemyCalculationRepository:
    """CalculationRepository backed by the relational store."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> list[Calculation]:
        result = await self._db.execute(
            select(Calculation).order_by(Calculation.id),
        )
        return list(result.scalars().all())

    async def find_by_project_id(
        self, project_id: ProjectId,
    ) -> list[Calculation]:
        result = await self._db.execute(
            select(Calculation)
            .where(Calculation.project_id == project_id)
            .order_by(Calculation.id),
        )
        return list(result.scalars().all())

    async def find_by_project_id_and_id(
        self, project_id: ProjectId, calculation_id: CalculationId,
    ) -> Calculation | None:
        result = await self._db.execute(
            select(Calculation).where(
                Calculation.project_id == project_id,
                Calculation.id == calculation_id,
            ),
        )
        return result.scalar_one_or_none()

    async def save(self, calculation: Calculation) -> Calculation:
        self._db.add(calculation)
        await self._db.commit()
        return calculation

    async def save_all(
        self, calculations: list[Calculation],
    ) -> list[Calculation]:
        self._db.add_all(calculations)
        await self._db.commit()
        return calculations

    async def delete_by_project_id_and_id(
        self, project_id: ProjectId, calculation_id: CalculationId,
    ) -> None:
        calculation = await self.find_by_project_id_and_id(project_id, calculation_id)
        if calculation is None:
            return
        await self._db.delete(calculation)
        await self._db.commit()
