"""core/operators.py"""
from enum import Enum
import logging

import numpy as np

from core.errors import DivisionByZero, InvalidExpression

logger = logging.getLogger(__name__)

OPERATOR_SYMBOLS = '+-*/^'


class Operator(Enum):
    """支持的全部操作符，优先级和元数固定"""

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POWER = '^'
    UNARY_NEGATE = 'neg'

    @property
    def precedence(self):
        return _PRECEDENCE[self]

    @property
    def arity(self):
        return 1 if self is Operator.UNARY_NEGATE else 2

    @property
    def is_unary(self):
        return self.arity == 1

    @staticmethod
    def from_symbol(symbol, is_unary=False):
        """
        单字符符号 -> Operator
        Args:
            symbol: '+', '-', '*', '/', '^' 之一
            is_unary: 为True且符号为'-'时返回UNARY_NEGATE
        Returns:
            Operator，无法识别时返回None
        """
        if is_unary and symbol == '-':
            return Operator.UNARY_NEGATE
        return _BINARY_BY_SYMBOL.get(symbol)

    def apply(self, operand1, operand2=None):
        """
        对操作数应用操作符
        Args:
            operand1: 左操作数（一元时为唯一操作数）
            operand2: 右操作数，一元操作符必须为None
        Returns:
            float结果
        """
        if self is Operator.UNARY_NEGATE:
            if operand2 is not None:
                raise InvalidExpression("Unary negation takes exactly one operand")
            return -operand1

        if self is Operator.ADD:
            # 缺省右操作数视为0，调用方仍应传入
            return operand1 + (0.0 if operand2 is None else operand2)

        if operand2 is None:
            raise InvalidExpression(f"Operator '{self.value}' requires two operands")

        if self is Operator.SUBTRACT:
            return operand1 - operand2
        if self is Operator.MULTIPLY:
            return operand1 * operand2
        if self is Operator.DIVIDE:
            if operand2 == 0:
                raise DivisionByZero(f"Division by zero: {operand1} / {operand2}")
            return operand1 / operand2
        if self is Operator.POWER:
            return Operator._power(operand1, operand2)

        raise InvalidExpression(f"Unhandled operator: {self.name}")

    @staticmethod
    def _power(base, exponent):
        """实数幂：负底数的分数次幂得到NaN，溢出得到inf"""
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            result = np.power(np.float64(base), np.float64(exponent))
        if np.isnan(result):
            logger.debug(f"Power {base} ^ {exponent} is undefined over the reals")
        return float(result)


_PRECEDENCE = {
    Operator.POWER: 4,
    Operator.UNARY_NEGATE: 3,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
}

_BINARY_BY_SYMBOL = {
    '+': Operator.ADD,
    '-': Operator.SUBTRACT,
    '*': Operator.MULTIPLY,
    '/': Operator.DIVIDE,
    '^': Operator.POWER,
}
