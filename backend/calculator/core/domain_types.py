"""Domain Types — identity types that replace bare ints across the codebase.

Invariants:
    - ProjectId, CalculationId wrap store-assigned integer identities
    - Result is the float produced by an evaluator (never a string)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


ProjectId = NewType("ProjectId", int)
CalculationId = NewType("CalculationId", int)
Result = NewType("Result", float)
