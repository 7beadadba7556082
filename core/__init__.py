"""核心模块 - 操作符、Token系统、分词、后缀转换和RPN求值"""
from .errors import (
    ExpressionError, DivisionByZero, InvalidNumberLiteral,
    UnmatchedParenthesis, StackUnderflow, InvalidExpression, UnrecognizedOperator
)
from .operators import Operator, OPERATOR_SYMBOLS
from .token_system import TokenType, Token, format_tokens
from .tokenizer import tokenize
from .postfix_converter import to_postfix
from .rpn_evaluator import RPNEvaluator

__all__ = [
    'ExpressionError', 'DivisionByZero', 'InvalidNumberLiteral',
    'UnmatchedParenthesis', 'StackUnderflow', 'InvalidExpression',
    'UnrecognizedOperator',
    'Operator', 'OPERATOR_SYMBOLS', 'TokenType', 'Token', 'format_tokens',
    'tokenize', 'to_postfix', 'RPNEvaluator'
]
