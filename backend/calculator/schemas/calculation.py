"""Calculation Schemas — request/response models for calculations and results.

Invariants:
    - CalculationWrite.expression: 1-1000 chars, stripped, non-empty
    - description is optional free text
    - result is never accepted from clients (read-only, written by result endpoints)

Design Decisions:
    - Bodies accept camelCase or snake_case (populate_by_name); responses emit camelCase
    - projectId comes from the path, never from the body
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CalculationWrite(BaseModel):
    """Calculation create/replace body."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    description: str | None = Field(None, max_length=2000)
    expression: str = Field(min_length=1, max_length=1000)

    @field_validator("expression")
    @classmethod
    def strip_expression(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("expression cannot be empty or whitespace")
        return v


class CalculationResponse(BaseModel):
    """Calculation response — public-facing calculation data."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    project_id: int
    description: str | None = None
    expression: str
    result: float | None = None
