"""Boundary Protocols — contracts between services and the store.

Invariants:
    - Services NEVER import SQLAlchemy — they talk to these Protocols only
    - Implementations provided by infrastructure via dependency injection
    - find_* methods return None / [] for absence; raising NotFound is the service's job

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from calculator.core.domain_types import ProjectId, CalculationId
from calculator.models.calculation import Calculation
from calculator.models.project import Project


class ProjectRepository(Protocol):
    """Contract for project persistence."""
    async def find_all(self) -> list[Project]: ...
    async def find_by_id(self, project_id: ProjectId) -> Project | None: ...
    async def save(self, project: Project) -> Project: ...
    async def delete_by_id(self, project_id: ProjectId) -> None: ...


class CalculationRepository(Protocol):
    """Contract for calculation persistence, scoped by project."""
    async def find_all(self) -> list[Calculation]: ...
    async def find_by_project_id(
        self, project_id: ProjectId,
    ) -> list[Calculation]: ...
    async def find_by_project_id_and_id(
        self, project_id: ProjectId, calculation_id: CalculationId,
    ) -> Calculation | None: ...
    async def save(self, calculation: Calculation) -> Calculation: ...
    async def save_all(
        self, calculations: list[Calculation],
    ) -> list[Calculation]: ...
    async def delete_by_project_id_and_id(
        self, project_id: ProjectId, calculation_id: CalculationId,
    ) -> None: ...
