"""Tests for the postfix stack machine."""

from __future__ import annotations

import math

import pytest

from rpn.errors import (
    DivisionByZeroError,
    DomainError,
    EmptyExpressionError,
    LeftoverOperandsError,
    MalformedExpressionError,
    NoOperatorAppliedError,
    NumericOverflowError,
    StackUnderflowError,
)
from rpn.rpn_evaluator import RPNEvaluator
from rpn.token_system import tokenize


def _evaluate(expression: str, **kwargs) -> float:
    return RPNEvaluator.evaluate(tokenize(expression), **kwargs)


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("3 4 +", 7.0),
        ("5 1 2 + 4 * + 3 -", 14.0),
        ("2 3 ^", 8.0),
        ("10 4 -", 6.0),
        ("-3 4 *", -12.0),
        ("7 2 /", 3.5),
        ("2 3 4 * +", 14.0),
        ("1.5 2.5 + 2 ^", 16.0),
        ("2 3 ^ 2 ^", 64.0),
    ],
)
def test_evaluates_balanced_expressions(expression: str, expected: float) -> None:
    result = _evaluate(expression)

    assert result == pytest.approx(expected)
    assert isinstance(result, float)


def test_first_token_operator_is_underflow() -> None:
    with pytest.raises(StackUnderflowError) as excinfo:
        _evaluate("+ 3 4")

    assert excinfo.value.position == 0
    assert isinstance(excinfo.value, MalformedExpressionError)


def test_operator_with_one_value_is_underflow() -> None:
    with pytest.raises(StackUnderflowError) as excinfo:
        _evaluate("3 +")

    assert excinfo.value.position == 1
    assert excinfo.value.token == "+"


def test_later_operator_underflow_is_detected() -> None:
    with pytest.raises(StackUnderflowError) as excinfo:
        _evaluate("3 4 + +")

    assert excinfo.value.position == 3


@pytest.mark.parametrize("expression", ["x 3 +", "3 y +", "3 4 %", "3 4 + abc"])
def test_unknown_token_is_malformed(expression: str) -> None:
    with pytest.raises(MalformedExpressionError):
        _evaluate(expression)


def test_fails_at_first_bad_token() -> None:
    trace = []
    with pytest.raises(MalformedExpressionError) as excinfo:
        _evaluate("3 4 % 1 0 /", trace=trace)

    # 除零不会被执行到
    assert excinfo.value.token == "%"
    assert trace == ["PUSH 3.0", "PUSH 4.0"]


def test_empty_sequence_is_error() -> None:
    with pytest.raises(EmptyExpressionError):
        _evaluate("   ")


@pytest.mark.parametrize("expression", ["5", "3 4"])
def test_expression_without_operator_is_error(expression: str) -> None:
    with pytest.raises(NoOperatorAppliedError):
        _evaluate(expression)


def test_leftover_operands_are_error() -> None:
    with pytest.raises(LeftoverOperandsError):
        _evaluate("1 2 3 +")


def test_division_by_zero_carries_position() -> None:
    with pytest.raises(DivisionByZeroError) as excinfo:
        _evaluate("1 2 2 - /")

    assert excinfo.value.position == 4


def test_domain_error_on_fractional_power_of_negative() -> None:
    with pytest.raises(DomainError):
        _evaluate("-8 0.5 ^")


def test_oversized_literal_is_overflow() -> None:
    with pytest.raises(NumericOverflowError) as excinfo:
        _evaluate("9" * 400 + " 1 +")

    assert excinfo.value.position == 0


def test_ieee_mode_propagates_infinity_and_nan() -> None:
    assert _evaluate("1 0 /", strict_arithmetic=False) == math.inf
    assert math.isnan(_evaluate("0 0 /", strict_arithmetic=False))


def test_multiple_decimal_points_loose_mode() -> None:
    with pytest.raises(MalformedExpressionError):
        _evaluate("1.2.3 1 +")

    result = RPNEvaluator.evaluate(tokenize("1.2.3 1 +", strict_decimal=False))
    assert result == pytest.approx(2.2)


def test_trace_records_push_and_apply_steps() -> None:
    trace = []
    _evaluate("3 4 +", trace=trace)

    assert trace == ["PUSH 3.0", "PUSH 4.0", "ADD 3.0 + 4.0 = 7.0"]


def test_repeated_evaluation_is_idempotent() -> None:
    tokens = tokenize("5 1 2 + 4 * + 3 -")

    assert RPNEvaluator.evaluate(tokens) == RPNEvaluator.evaluate(tokens)
