"""Evaluate infix arithmetic expressions through the calculator engine."""
import math
from typing import Dict, List, Tuple

from calculator_service.common.calculator import apply_operation
from calculator_service.common.operations import OperationKind


# Operator symbol -> (precedence, engine operation)
OPERATORS: Dict[str, Tuple[int, OperationKind]] = {
    "+": (1, OperationKind.ADD),
    "-": (1, OperationKind.SUBTRACT),
    "*": (2, OperationKind.MULTIPLY),
    "/": (2, OperationKind.DIVIDE),
}


class ExpressionParser:
    """
    Parse and evaluate space-separated arithmetic expressions.

    No eval() is involved: tokens are reordered with the Shunting-yard
    algorithm into Reverse Polish Notation (RPN), and the RPN is reduced on a
    stack where every operator is handed to the calculator engine. A division
    by zero therefore surfaces as DivisionByZeroError, like a direct call.

    Examples:
        - Infix expression: 3 + 4 * 2
        - RPN: 3 4 2 * +
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split an expression into tokens.

        Tokens must be separated by whitespace (e.g. "3 + 4 * 2").

        :param str expr: Arithmetic expression

        :return: List of tokens
        :rtype: List[str]
        """
        return expr.split()

    @staticmethod
    def _is_number(token: str) -> bool:
        """Return True if the token parses as a finite float."""
        try:
            value = float(token)
        except ValueError:
            return False
        return math.isfinite(value)

    @staticmethod
    def to_rpn(tokens: List[str]) -> List[str]:
        """
        Convert infix tokens into RPN order.

        :param List[str] tokens: Infix tokens

        :return: Tokens in RPN order
        :rtype: List[str]
        :raises ValueError: If a token is neither a number nor a known operator
        """
        output: List[str] = []
        stack: List[str] = []

        for token in tokens:
            if ExpressionParser._is_number(token):
                output.append(token)
                continue
            if token not in OPERATORS:
                raise ValueError(f"Unknown token: {token!r}")
            # Left associative: pop operators of higher or equal precedence
            prec = OPERATORS[token][0]
            while stack and OPERATORS[stack[-1]][0] >= prec:
                output.append(stack.pop())
            stack.append(token)

        output.extend(reversed(stack))
        return output

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result
        :rtype: float
        :raises ValueError: If the expression is empty or malformed
        :raises DivisionByZeroError: If a divisor evaluates to zero
        """
        tokens = ExpressionParser.tokenize(expr)
        if not tokens:
            raise ValueError("Empty expression")

        if tokens[0] in OPERATORS or tokens[-1] in OPERATORS:
            raise ValueError(f"Expression cannot start or end with an operator: {expr}")

        stack: List[float] = []
        for token in ExpressionParser.to_rpn(tokens):
            if ExpressionParser._is_number(token):
                stack.append(float(token))
                continue
            if len(stack) < 2:
                raise ValueError(f"Invalid expression (not enough operands): {expr}")
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operation(OPERATORS[token][1], a, b))

        if len(stack) != 1:
            raise ValueError(f"Invalid expression (remaining operands): {expr}")

        return stack[0]
