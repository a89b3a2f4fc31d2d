"""Project Service — orchestrates project lookups and mutations.

Invariants:
    - get_project raises ProjectNotFoundError for unknown ids (never returns None)
    - An empty list from list_projects is a valid result, distinct from not-found
    - update/delete assume the caller already called get_project
"""

import logging

from calculator.core.domain_types import ProjectId
from calculator.core.errors import ProjectNotFoundError
from calculator.core.repository_protocols import ProjectRepository
from calculator.models.project import Project

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, repository: ProjectRepository):
        self._repository = repository

    async def list_projects(self) -> list[Project]:
        return await self._repository.find_all()

    async def get_project(self, project_id: ProjectId) -> Project:
        project = await self._repository.find_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def add_project(self, project: Project) -> Project:
        saved = await self._repository.save(project)
        logger.info("Project created", extra={"project_id": saved.id})
        return saved

    async def update_project(self, project: Project) -> Project:
        saved = await self._repository.save(project)
        logger.info("Project updated", extra={"project_id": saved.id})
        return saved

    async def delete_project(self, project_id: ProjectId) -> None:
        await self._repository.delete_by_id(project_id)
        logger.info("Project deleted", extra={"project_id": project_id})
