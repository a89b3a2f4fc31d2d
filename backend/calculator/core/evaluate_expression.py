"""Expression Evaluation — pure arithmetic evaluator over Python's ast.

Invariants:
    - Only numeric literals, unary +/- and binary + - * / // % ** are accepted
    - Every failure surfaces as ExpressionError (never SyntaxError/ZeroDivisionError)
    - Literals are evaluated as floats, so results are always finite floats

Design Decisions:
    - ast.parse(mode="eval") + node whitelist over eval(): no names, calls or attributes reachable
    - ExpressionEvaluator as Protocol: result service depends on the contract, not this class
"""

import ast
import math
import operator
from typing import Callable, Protocol

from calculator.core.domain_types import Result
from calculator.core.errors import ExpressionError

MAX_EXPONENT = 1000

_BIN_OPS: dict[type, Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

_UNARY_OPS: dict[type, Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


class ExpressionEvaluator(Protocol):
    """Structural contract for anything that turns an expression into a number.

    Implementations must raise ExpressionError for any expression they cannot
    evaluate; batch evaluation only tolerates that error type.
    """
    def evaluate(self, expression: str) -> Result: ...


class ArithmeticEvaluator:
    """Default evaluator: plain arithmetic with parentheses."""

    def __init__(self, max_exponent: int = MAX_EXPONENT):
        self._max_exponent = max_exponent

    def evaluate(self, expression: str) -> Result:
        source = expression.strip()
        if not source:
            raise ExpressionError(expression, "expression is empty")
        try:
            tree = ast.parse(source, mode="eval")
        except (SyntaxError, ValueError):
            raise ExpressionError(expression, "invalid syntax")
        except RecursionError:
            raise ExpressionError(expression, "expression is nested too deeply")

        try:
            value = self._eval_node(tree.body, expression)
            result = float(value)
        except ZeroDivisionError:
            raise ExpressionError(expression, "division by zero")
        except OverflowError:
            raise ExpressionError(expression, "numeric overflow")
        except RecursionError:
            raise ExpressionError(expression, "expression is nested too deeply")
        except TypeError:
            # complex results, e.g. (-8) ** 0.5
            raise ExpressionError(expression, "result is not a real number")

        if not math.isfinite(result):
            raise ExpressionError(expression, "result is not finite")
        return Result(result)

    def _eval_node(self, node: ast.AST, expression: str) -> float:
        if isinstance(node, ast.Constant):
            if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
                raise ExpressionError(expression, f"unsupported literal {node.value!r}")
            # float arithmetic keeps every node O(1) and overflows instead of growing
            return float(node.value)
        if isinstance(node, ast.UnaryOp):
            op = _UNARY_OPS.get(type(node.op))
            if op is None:
                raise ExpressionError(
                    expression, f"unsupported operator {type(node.op).__name__}",
                )
            return op(self._eval_node(node.operand, expression))
        if isinstance(node, ast.BinOp):
            op = _BIN_OPS.get(type(node.op))
            if op is None:
                raise ExpressionError(
                    expression, f"unsupported operator {type(node.op).__name__}",
                )
            left = self._eval_node(node.left, expression)
            right = self._eval_node(node.right, expression)
            if isinstance(node.op, ast.Pow) and abs(right) > self._max_exponent:
                raise ExpressionError(
                    expression, f"exponent exceeds {self._max_exponent}",
                )
            return op(left, right)
        raise ExpressionError(
            expression, f"unsupported element {type(node).__name__}",
        )
