"""Expression Evaluation — arithmetic whitelist and failure mapping.

Tests:
    - Operators, precedence, parentheses and unary signs
    - Every failure surfaces as ExpressionError with a readable reason
    - Names, calls and attributes are never evaluated
"""

import pytest

from calculator.core.errors import ExpressionError
from calculator.core.evaluate_expression import ArithmeticEvaluator

evaluate = ArithmeticEvaluator().evaluate


@pytest.mark.parametrize("expression,expected", [
    ("2 + 3", 5.0),
    ("10 - 4 - 3", 3.0),
    ("2 + 3 * 4", 14.0),
    ("(2 + 3) * 4", 20.0),
    ("7 / 2", 3.5),
    ("7 // 2", 3.0),
    ("7 % 4", 3.0),
    ("2 ** 3 ** 2", 512.0),
    ("-3 + +5", 2.0),
    ("-(1.5 * 2)", -3.0),
    ("  42  ", 42.0),
])
def test_evaluates_arithmetic(expression, expected):
    assert evaluate(expression) == expected


def test_result_is_float():
    assert isinstance(evaluate("1 + 1"), float)


def test_division_by_zero():
    with pytest.raises(ExpressionError) as exc:
        evaluate("1 / 0")
    assert exc.value.reason == "division by zero"


def test_invalid_syntax():
    with pytest.raises(ExpressionError) as exc:
        evaluate("2 +")
    assert exc.value.reason == "invalid syntax"


def test_empty_expression():
    with pytest.raises(ExpressionError):
        evaluate("   ")


@pytest.mark.parametrize("expression", [
    "__import__('os').system('true')",
    "abs(-1)",
    "x + 1",
    "(1).real",
    "'a' * 3",
    "True + 1",
    "[1, 2]",
    "1 < 2",
])
def test_rejects_non_arithmetic(expression):
    with pytest.raises(ExpressionError):
        evaluate(expression)


def test_exponent_limit():
    with pytest.raises(ExpressionError) as exc:
        evaluate("2 ** 100000")
    assert "exponent" in exc.value.reason


def test_custom_exponent_limit():
    evaluator = ArithmeticEvaluator(max_exponent=2)
    assert evaluator.evaluate("3 ** 2") == 9.0
    with pytest.raises(ExpressionError):
        evaluator.evaluate("3 ** 3")


def test_overflow():
    with pytest.raises(ExpressionError) as exc:
        evaluate("10.0 ** 400")
    assert exc.value.reason == "numeric overflow"


def test_complex_result_rejected():
    with pytest.raises(ExpressionError):
        evaluate("(-8) ** 0.5")


def test_error_maps_to_422():
    with pytest.raises(ExpressionError) as exc:
        evaluate("1 / 0")
    assert exc.value.http_status == 422
    assert exc.value.to_response() == {
        "errorMessage": "Expression '1 / 0' cannot be evaluated: division by zero",
    }


@pytest.mark.parametrize("expression", [
    "((9 ** 999) ** 999) ** 9",
    "(9 ** 999) ** 999",
    "99999999999999999999 ** 999",
])
def test_nested_powers_overflow_instead_of_growing(expression):
    with pytest.raises(ExpressionError) as exc:
        evaluate(expression)
    assert exc.value.reason == "numeric overflow"


def test_integer_literals_evaluate_as_floats():
    assert evaluate("2 ** 10") == 1024.0
    assert evaluate("7 // 2") == 3.0


def test_oversized_integer_literal_overflows():
    with pytest.raises(ExpressionError) as exc:
        evaluate("1" + "0" * 400)
    assert exc.value.reason == "numeric overflow"
