"""Calculation Routes — CRUD for /projects/{project_id}/calculations.

Invariants:
    - Every handler resolves the owning project first (unknown project → 404)
    - Empty listing answers 204
    - PUT and DELETE answer 200 (unlike projects, which answer 204)
    - Changing the expression clears the stored result
"""

from fastapi import APIRouter, Depends, Response, status

from calculator.api.dependencies import get_calculation_service, get_project_service
from calculator.core.domain_types import CalculationId, ProjectId
from calculator.models.calculation import Calculation
from calculator.schemas.calculation import CalculationResponse, CalculationWrite
from calculator.services.calculation_service import CalculationService
from calculator.services.project_service import ProjectService

router = APIRouter(
    prefix="/projects/{project_id}/calculations", tags=["calculations"],
)


@router.get("", response_model=list[CalculationResponse])
async def get_calculations(
    project_id: int,
    projects: ProjectService = Depends(get_project_service),
    calculations: CalculationService = Depends(get_calculation_service),
):
    """List a project's calculations."""
    project = await projects.get_project(ProjectId(project_id))
    found = await calculations.list_calculations_by_project(project)
    if not found:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [CalculationResponse.model_validate(c) for c in found]


@router.post(
    "", response_model=CalculationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_calculation(
    project_id: int,
    body: CalculationWrite,
    projects: ProjectService = Depends(get_project_service),
    calculations: CalculationService = Depends(get_calculation_service),
):
    """Create a calculation under a project."""
    project = await projects.get_project(ProjectId(project_id))
    calculation = await calculations.add_calculation(
        Calculation(
            project_id=project.id,
            description=body.description,
            expression=body.expression,
        ),
    )
    return CalculationResponse.model_validate(calculation)


@router.get("/{calculation_id}", response_model=CalculationResponse)
async def get_calculation(
    project_id: int,
    calculation_id: int,
    projects: ProjectService = Depends(get_project_service),
    calculations: CalculationService = Depends(get_calculation_service),
):
    project = await projects.get_project(ProjectId(project_id))
    calculation = await calculations.get_calculation(
        project, CalculationId(calculation_id),
    )
    return CalculationResponse.model_validate(calculation)


@router.put("/{calculation_id}", response_model=CalculationResponse)
async def update_calculation(
    project_id: int,
    calculation_id: int,
    body: CalculationWrite,
    projects: ProjectService = Depends(get_project_service),
    calculations: CalculationService = Depends(get_calculation_service),
):
    """Replace a calculation's description and expression."""
    project = await projects.get_project(ProjectId(project_id))
    calculation = await calculations.get_calculation(
        project, CalculationId(calculation_id),
    )
    if calculation.expression != body.expression:
        calculation.result = None
    calculation.description = body.description
    calculation.expression = body.expression
    calculation = await calculations.update_calculation(calculation)
    return CalculationResponse.model_validate(calculation)


@router.delete("/{calculation_id}", status_code=status.HTTP_200_OK)
async def delete_calculation(
    project_id: int,
    calculation_id: int,
    projects: ProjectService = Depends(get_project_service),
    calculations: CalculationService = Depends(get_calculation_service),
):
    project = await projects.get_project(ProjectId(project_id))
    await calculations.get_calculation(project, CalculationId(calculation_id))
    await calculations.delete_calculation(project, CalculationId(calculation_id))
    return Response(status_code=status.HTTP_200_OK)
