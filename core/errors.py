"""core/errors.py - 表达式求值各阶段抛出的异常"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""


class DivisionByZero(ExpressionError):
    """除数为0"""


class InvalidNumberLiteral(ExpressionError):
    """数字文本无法解析为浮点数（如 1.2.3）"""


class UnmatchedParenthesis(ExpressionError):
    """括号不匹配"""


class StackUnderflow(ExpressionError):
    """操作数不足"""


class InvalidExpression(ExpressionError):
    """后缀求值结束时栈中不是恰好一个值"""


class UnrecognizedOperator(ExpressionError):
    """操作符模型无法识别的符号"""
