"""Route Dependencies — wires services to the request's database session.

Invariants:
    - One AsyncSession per request, shared by every service the route uses
    - Overriding get_db (tests) or get_expression_evaluator swaps the whole chain
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from calculator.core.evaluate_expression import ArithmeticEvaluator, ExpressionEvaluator
from calculator.infrastructure.database import get_db
from calculator.infrastructure.repositories import (
    SqlAlchemyCalculationRepository, SqlAlchemyProjectRepository,
)
from calculator.services.calculation_service import CalculationService
from calculator.services.project_service import ProjectService
from calculator.services.result_service import ResultService


def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    return ProjectService(SqlAlchemyProjectRepository(db))


def get_calculation_service(
    db: AsyncSession = Depends(get_db),
) -> CalculationService:
    return CalculationService(SqlAlchemyCalculationRepository(db))


def get_expression_evaluator() -> ExpressionEvaluator:
    return ArithmeticEvaluator()


def get_result_service(
    db: AsyncSession = Depends(get_db),
    calculation_service: CalculationService = Depends(get_calculation_service),
    evaluator: ExpressionEvaluator = Depends(get_expression_evaluator),
) -> ResultService:
    return ResultService(
        SqlAlchemyCalculationRepository(db), calculation_service, evaluator,
    )
