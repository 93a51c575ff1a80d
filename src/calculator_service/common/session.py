"""Accumulator that chains operations onto the last result."""
from typing import List

from pydantic import BaseModel, Field

from calculator_service.common.calculator import apply_operation
from calculator_service.common.operations import ChainRequest, ChainResult, OperationKind


class CalculatorSession(BaseModel):
    """
    Calculator holding the result of its last operation.

    A session belongs to exactly one request; the Flask handlers build a new
    one per call and never store it on the app.
    """

    last_result: float = Field(default=0.0, description="Result of the last successful operation")
    history: List[float] = Field(default_factory=list, description="Every result in order")

    def apply(self, operation: OperationKind, operand: float) -> float:
        """
        Apply ``last_result <operation> operand`` and store the outcome.

        The state is untouched when the engine raises.

        :param OperationKind operation: Operation to apply
        :param float operand: Right-hand operand

        :return: The new last result
        :rtype: float
        """
        result = apply_operation(operation, self.last_result, operand)
        self.last_result = result
        self.history.append(result)
        return result

    def clear(self) -> None:
        """Reset the accumulator to zero and forget the history."""
        self.last_result = 0.0
        self.history.clear()


def run_chain(request: ChainRequest) -> ChainResult:
    """Run every step of ``request`` on a fresh session."""
    session = CalculatorSession(last_result=request.start)
    for step in request.steps:
        session.apply(step.operation, step.operand)
    return ChainResult(result=session.last_result, history=list(session.history))
