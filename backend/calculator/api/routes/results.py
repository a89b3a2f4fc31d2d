"""Result Routes — evaluate expressions at three scopes, plus the unscoped listing.

Invariants:
    - GET /calculations answers 204 when there are no calculations
    - Result endpoints answer 200 on success, even for an empty batch
    - Project / calculation existence is checked before any evaluation (404)
    - Single-calculation evaluation failure → 422; batch failures → result null
"""

from fastapi import APIRouter, Depends, Response, status

from calculator.api.dependencies import (
    get_calculation_service, get_project_service, get_result_service,
)
from calculator.core.domain_types import CalculationId, ProjectId
from calculator.schemas.calculation import CalculationResponse
from calculator.services.calculation_service import CalculationService
from calculator.services.project_service import ProjectService
from calculator.services.result_service import ResultService

router = APIRouter(tags=["results"])


@router.get("/calculations", response_model=list[CalculationResponse])
async def get_all_calculations(
    calculations: CalculationService = Depends(get_calculation_service),
):
    """List every calculation across all projects."""
    found = await calculations.list_all_calculations()
    if not found:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [CalculationResponse.model_validate(c) for c in found]


@router.get("/calculations/result", response_model=list[CalculationResponse])
async def set_results(
    results: ResultService = Depends(get_result_service),
):
    """Evaluate every calculation."""
    evaluated = await results.set_results()
    return [CalculationResponse.model_validate(c) for c in evaluated]


@router.get(
    "/projects/{project_id}/result",
    response_model=list[CalculationResponse],
)
async def set_results_by_project(
    project_id: int,
    projects: ProjectService = Depends(get_project_service),
    results: ResultService = Depends(get_result_service),
):
    project = await projects.get_project(ProjectId(project_id))
    evaluated = await results.set_results_by_project(project)
    return [CalculationResponse.model_validate(c) for c in evaluated]


@router.get(
    "/projects/{project_id}/calculations/{calculation_id}/result",
    response_model=CalculationResponse,
)
async def set_result_by_calculation(
    project_id: int,
    calculation_id: int,
    projects: ProjectService = Depends(get_project_service),
    results: ResultService = Depends(get_result_service),
):
    project = await projects.get_project(ProjectId(project_id))
    calculation = await results.set_result(
        project, CalculationId(calculation_id),
    )
    return CalculationResponse.model_validate(calculation)
