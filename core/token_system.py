"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum

from core.errors import UnrecognizedOperator
from core.operators import Operator


class TokenType(Enum):
    NUMBER = "number"  # 数字文本
    OPERATOR = "operator"  # 操作符
    PARENTHESIS = "parenthesis"  # 括号


@dataclass(frozen=True)
class Token:
    """
    分词结果，按type区分三种变体：
    - NUMBER: text为未解析的数字文本
    - OPERATOR: text为符号，is_unary标记一元负号
    - PARENTHESIS: is_open区分左右括号
    """
    type: TokenType
    text: str
    is_unary: bool = False
    is_open: bool = False

    @classmethod
    def number(cls, text):
        return cls(TokenType.NUMBER, text)

    @classmethod
    def operator(cls, symbol, is_unary=False):
        return cls(TokenType.OPERATOR, symbol, is_unary=is_unary and symbol == '-')

    @classmethod
    def parenthesis(cls, is_open):
        return cls(TokenType.PARENTHESIS, '(' if is_open else ')', is_open=is_open)

    @property
    def is_number(self):
        return self.type is TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type is TokenType.OPERATOR

    @property
    def is_open_parenthesis(self):
        return self.type is TokenType.PARENTHESIS and self.is_open

    @property
    def is_close_parenthesis(self):
        return self.type is TokenType.PARENTHESIS and not self.is_open

    def to_operator(self):
        """OPERATOR token对应的Operator，无法映射时抛出UnrecognizedOperator"""
        op = Operator.from_symbol(self.text, is_unary=self.is_unary) if self.is_operator else None
        if op is None:
            raise UnrecognizedOperator(f"Unrecognized operator token: {self.text!r}")
        return op

    def __str__(self):
        if self.is_operator and self.is_unary:
            return Operator.UNARY_NEGATE.value
        return self.text


def format_tokens(tokens):
    """以空格连接token，用于日志和命令行输出"""
    return ' '.join(str(t) for t in tokens)
