"""Project Routes — CRUD for /projects.

Invariants:
    - Empty listing answers 204, never 200 with []
    - PUT and DELETE answer 204 and check existence first (404 otherwise)
    - Body validation runs before any lookup (invalid body → 400 even for unknown ids)
"""

from fastapi import APIRouter, Depends, Response, status

from calculator.api.dependencies import get_project_service
from calculator.core.domain_types import ProjectId
from calculator.models.project import Project
from calculator.schemas.project import ProjectResponse, ProjectWrite
from calculator.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def get_projects(
    service: ProjectService = Depends(get_project_service),
):
    """List all projects."""
    projects = await service.list_projects()
    if not projects:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.post(
    "", response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_project(
    body: ProjectWrite,
    service: ProjectService = Depends(get_project_service),
):
    """Create a project."""
    project = await service.add_project(
        Project(name=body.name, calculations=[]),
    )
    return ProjectResponse.model_validate(project)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
):
    """Get one project with its calculations."""
    project = await service.get_project(ProjectId(project_id))
    return ProjectResponse.model_validate(project)


@router.put("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_project(
    project_id: int,
    body: ProjectWrite,
    service: ProjectService = Depends(get_project_service),
):
    """Replace a project's fields. Calculations are left untouched."""
    project = await service.get_project(ProjectId(project_id))
    project.name = body.name
    await service.update_project(project)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project and, by cascade, its calculations."""
    await service.get_project(ProjectId(project_id))
    await service.delete_project(ProjectId(project_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
