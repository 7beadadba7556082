"""RPN求值器测试"""
import pytest

from core.errors import (
    DivisionByZero, InvalidExpression, InvalidNumberLiteral,
    StackUnderflow, UnrecognizedOperator
)
from core.rpn_evaluator import RPNEvaluator
from core.token_system import Token, TokenType


def n(text):
    return Token.number(text)


def op(symbol, is_unary=False):
    return Token.operator(symbol, is_unary=is_unary)


def test_binary_operand_order():
    # 后入栈的是右操作数
    assert RPNEvaluator.evaluate([n("8"), n("2"), op("-")]) == 6.0
    assert RPNEvaluator.evaluate([n("8"), n("2"), op("/")]) == 4.0
    assert RPNEvaluator.evaluate([n("2"), n("3"), op("^")]) == 8.0


def test_unary():
    assert RPNEvaluator.evaluate([n("2"), op("-", is_unary=True)]) == -2.0
    assert RPNEvaluator.evaluate([n("2"), op("-", True), op("-", True)]) == 2.0


def test_single_number():
    assert RPNEvaluator.evaluate([n("4.5")]) == 4.5


@pytest.mark.parametrize("text,expected", [("1.", 1.0), (".5", 0.5), ("007", 7.0)])
def test_parse_number(text, expected):
    assert RPNEvaluator.parse_number(text) == expected


@pytest.mark.parametrize("text", ["1.2.3", ".", ".."])
def test_invalid_number_literal(text):
    with pytest.raises(InvalidNumberLiteral):
        RPNEvaluator.evaluate([n(text)])


@pytest.mark.parametrize("tokens", [
    [op("+")],
    [n("1"), op("*")],
    [op("-", True)],
])
def test_stack_underflow(tokens):
    with pytest.raises(StackUnderflow):
        RPNEvaluator.evaluate(tokens)


@pytest.mark.parametrize("tokens", [
    [],
    [n("1"), n("2")],
])
def test_final_stack_must_hold_one_value(tokens):
    with pytest.raises(InvalidExpression):
        RPNEvaluator.evaluate(tokens)


def test_parenthesis_in_postfix():
    with pytest.raises(InvalidExpression):
        RPNEvaluator.evaluate([n("1"), Token.parenthesis(True)])


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        RPNEvaluator.evaluate([n("5"), n("0"), op("/")])


def test_unrecognized_operator():
    with pytest.raises(UnrecognizedOperator):
        RPNEvaluator.evaluate([n("1"), n("2"), Token(TokenType.OPERATOR, "%")])
