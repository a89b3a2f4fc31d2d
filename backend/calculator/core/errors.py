"""Error Hierarchy — typed, categorized exceptions for all Calculator failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are recoverable; infrastructure errors (5xx) are critical
    - to_response() always produces the {"errorMessage": str} envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CalculatorError base: FastAPI global handler catches all
    - Not-found messages are part of the public contract (clients match on them)
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EVALUATION = "evaluation"
    DATABASE = "database"


class CalculatorError(Exception):
    """Base exception for all Calculator errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"errorMessage": self.message}


# ─── Domain Errors (4xx) ────────────────────────────────────────

class ValidationError(CalculatorError):
    """Request body or path failed boundary validation."""
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields or []


class ProjectNotFoundError(CalculatorError):
    """Project id does not exist."""
    def __init__(self, project_id: int):
        super().__init__(
            f"project '{project_id}' does not exist",
            "PROJECT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.project_id = project_id


class CalculationNotFoundError(CalculatorError):
    """Calculation id does not exist under the given project."""
    def __init__(self, calculation_id: int):
        super().__init__(
            f"Calculation '{calculation_id}' does not exist",
            "CALCULATION_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.calculation_id = calculation_id


class ExpressionError(CalculatorError):
    """Expression could not be parsed or evaluated."""
    def __init__(self, expression: str, reason: str):
        super().__init__(
            f"Expression '{expression}' cannot be evaluated: {reason}",
            "EXPRESSION_ERROR", ErrorCategory.EVALUATION,
            ErrorSeverity.ERROR, 422,
        )
        self.expression = expression
        self.reason = reason


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(CalculatorError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
