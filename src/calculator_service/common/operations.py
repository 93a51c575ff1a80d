"""Pydantic models for calculator requests, results and health status."""
from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator


class OperationKind(str, Enum):
    """Tag of the four supported arithmetic operations."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class OperationRequest(BaseModel):
    """Represents a single tagged operation and its two operands."""

    model_config = ConfigDict(frozen=True)

    operation: OperationKind = Field(..., description="Arithmetic operation to apply")
    a: float = Field(..., allow_inf_nan=False, description="Left operand")
    b: float = Field(..., allow_inf_nan=False, description="Right operand")


class OperationResult(BaseModel):
    """
    Represents the result of an evaluated operation.

    Results must be finite, so an overflowing operation fails validation.
    """

    operation: OperationKind = Field(..., description="Operation that was applied")
    a: float = Field(..., description="Left operand")
    b: float = Field(..., description="Right operand")
    result: float = Field(..., allow_inf_nan=False, description="Numeric result of the operation")


class ExpressionRequest(BaseModel):
    """Represents an infix arithmetic expression sent to the service."""

    expression: str = Field(..., description="Space-separated arithmetic expression")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v


class ExpressionResult(BaseModel):
    """Represents the result of an evaluated expression."""

    expression: str = Field(..., description="Original arithmetic expression")
    result: float = Field(..., allow_inf_nan=False, description="Evaluated numeric result of the expression")


class ChainStep(BaseModel):
    """One step applied to the running result of a calculator session."""

    operation: OperationKind
    operand: float = Field(..., allow_inf_nan=False)


class ChainRequest(BaseModel):
    """Sequence of steps applied to an accumulator starting at ``start``."""

    start: float = Field(default=0.0, allow_inf_nan=False, description="Initial accumulator value")
    steps: List[ChainStep] = Field(..., min_length=1, description="Steps applied in order")


class ChainResult(BaseModel):
    """Final accumulator value and every intermediate result."""

    result: FiniteFloat
    history: List[FiniteFloat]


class HealthStatus(BaseModel):
    """Fixed liveness payload; carries no dependency checks."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"


class ErrorResponse(BaseModel):
    """JSON body returned for every failed request."""

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable explanation")
