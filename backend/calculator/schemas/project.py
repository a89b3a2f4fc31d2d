"""Project Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ProjectWrite.name: 1-255 chars, stripped, non-empty
    - Responses serialize with camelCase keys (by_alias)

Design Decisions:
    - One write schema for POST and PUT: PUT is a full replace of the same fields
    - calculations in responses reuse CalculationResponse
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from calculator.schemas.calculation import CalculationResponse


class ProjectWrite(BaseModel):
    """Project create/replace body — validates name presence and whitespace."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProjectResponse(BaseModel):
    """Project response — project with its calculations."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    name: str
    calculations: list[CalculationResponse] = []
