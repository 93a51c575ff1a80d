"""Pure arithmetic engine behind every calculator endpoint."""
from collections.abc import Callable
from typing import Dict

from calculator_service.common.operations import OperationKind, OperationRequest, OperationResult


# Type alias for engine functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class CalculatorError(ArithmeticError):
    """Base class for errors raised by the calculator engine."""

    code: str = "CalculatorError"


class DivisionByZeroError(CalculatorError):
    """Raised by divide() when the divisor is exactly zero."""

    code = "DivisionByZero"

    def __init__(self, dividend: float) -> None:
        super().__init__(f"Cannot divide {dividend} by zero")
        self.dividend = dividend


def add(a: float, b: float) -> float:
    """Return a + b."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return a - b."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return a * b."""
    return a * b


def divide(a: float, b: float) -> float:
    """
    Return a / b.

    :param float a: Dividend
    :param float b: Divisor

    :return: Quotient using native float division
    :rtype: float
    :raises DivisionByZeroError: If b is zero (including -0.0)
    """
    if b == 0:
        raise DivisionByZeroError(a)
    return a / b


# Mapping of each operation tag to its engine function
OPERATIONS: Dict[OperationKind, OperatorFn] = {
    OperationKind.ADD: add,
    OperationKind.SUBTRACT: subtract,
    OperationKind.MULTIPLY: multiply,
    OperationKind.DIVIDE: divide,
}


def apply_operation(kind: OperationKind, a: float, b: float) -> float:
    """Run the engine function registered for ``kind`` on a and b."""
    return OPERATIONS[OperationKind(kind)](a, b)


def calculate(request: OperationRequest) -> OperationResult:
    """
    Evaluate a validated operation request.

    :param OperationRequest request: Tagged operation with its two operands

    :return: The request echoed back with its numeric result
    :rtype: OperationResult
    :raises DivisionByZeroError: For a divide request with a zero divisor
    """
    result = apply_operation(request.operation, request.a, request.b)
    return OperationResult(
        operation=request.operation,
        a=request.a,
        b=request.b,
        result=result,
    )
