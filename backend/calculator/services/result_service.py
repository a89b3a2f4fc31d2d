"""Result Service — evaluates calculation expressions and stores the results.

Invariants:
    - Single-calculation scope: an unevaluable expression raises ExpressionError
    - Batch scopes: an unevaluable expression stores result=None and the batch continues
    - Results are persisted in one commit per request

Design Decisions:
    - Evaluator injected (ExpressionEvaluator protocol): arithmetic today, swappable later
    - Batch failures logged at WARNING with calculation_id, not surfaced to the client
"""

import logging

from calculator.core.domain_types import CalculationId
from calculator.core.errors import ExpressionError
from calculator.core.evaluate_expression import ExpressionEvaluator
from calculator.core.repository_protocols import CalculationRepository
from calculator.models.calculation import Calculation
from calculator.models.project import Project
from calculator.services.calculation_service import CalculationService

logger = logging.getLogger(__name__)


class ResultService:
    def __init__(
        self,
        repository: CalculationRepository,
        calculation_service: CalculationService,
        evaluator: ExpressionEvaluator,
    ):
        self._repository = repository
        self._calculation_service = calculation_service
        self._evaluator = evaluator

    async def set_results(self) -> list[Calculation]:
        """Evaluate every calculation in every project."""
        calculations = await self._calculation_service.list_all_calculations()
        return await self._evaluate_batch(calculations)

    async def set_results_by_project(
        self, project: Project,
    ) -> list[Calculation]:
        calculations = (
            await self._calculation_service.list_calculations_by_project(project)
        )
        return await self._evaluate_batch(calculations)

    async def set_result(
        self, project: Project, calculation_id: CalculationId,
    ) -> Calculation:
        calculation = await self._calculation_service.get_calculation(
            project, calculation_id,
        )
        calculation.result = self._evaluator.evaluate(calculation.expression)
        return await self._repository.save(calculation)

    async def _evaluate_batch(
        self, calculations: list[Calculation],
    ) -> list[Calculation]:
        if not calculations:
            return calculations
        failed = 0
        for calculation in calculations:
            try:
                calculation.result = self._evaluator.evaluate(
                    calculation.expression,
                )
            except ExpressionError as e:
                calculation.result = None
                failed += 1
                logger.warning(
                    f"Evaluation failed: {e.reason}",
                    extra={
                        "project_id": calculation.project_id,
                        "calculation_id": calculation.id,
                        "error_code": e.code,
                    },
                )
        saved = await self._repository.save_all(calculations)
        logger.info(f"Evaluated {len(calculations)} calculation(s), {failed} failed")
        return saved
