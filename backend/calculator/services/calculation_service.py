"""Calculation Service — orchestrates calculation lookups and mutations, scoped by project.

Invariants:
    - Every scoped read filters on the owning project's id
    - get_calculation raises CalculationNotFoundError naming the calculation id
    - list_all_calculations is the only unscoped read
    - Deletes filter on the owning project too; a foreign id is a no-op
"""

import logging

from calculator.core.domain_types import CalculationId
from calculator.core.errors import CalculationNotFoundError
from calculator.core.repository_protocols import CalculationRepository
from calculator.models.calculation import Calculation
from calculator.models.project import Project

logger = logging.getLogger(__name__)


class CalculationService:
    def __init__(self, repository: CalculationRepository):
        self._repository = repository

    async def list_all_calculations(self) -> list[Calculation]:
        return await self._repository.find_all()

    async def list_calculations_by_project(
        self, project: Project,
    ) -> list[Calculation]:
        return await self._repository.find_by_project_id(project.id)

    async def get_calculation(
        self, project: Project, calculation_id: CalculationId,
    ) -> Calculation:
        calculation = await self._repository.find_by_project_id_and_id(
            project.id, calculation_id,
        )
        if calculation is None:
            raise CalculationNotFoundError(calculation_id)
        return calculation

    async def add_calculation(self, calculation: Calculation) -> Calculation:
        saved = await self._repository.save(calculation)
        logger.info(
            "Calculation created",
            extra={"project_id": saved.project_id, "calculation_id": saved.id},
        )
        return saved

    async def update_calculation(self, calculation: Calculation) -> Calculation:
        saved = await self._repository.save(calculation)
        logger.info(
            "Calculation updated",
            extra={"project_id": saved.project_id, "calculation_id": saved.id},
        )
        return saved

    async def delete_calculation(
        self, project: Project, calculation_id: CalculationId,
    ) -> None:
        await self._repository.delete_by_project_id_and_id(project.id, calculation_id)
        logger.info(
            "Calculation deleted",
            extra={"project_id": project.id, "calculation_id": calculation_id},
        )
