"""中缀 -> 后缀（逆波兰）转换，调度场算法"""
import logging

from core.errors import UnmatchedParenthesis
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


def to_postfix(tokens):
    """
    调度场算法的变体：
    - 同优先级二元操作符左结合（先弹出再入栈），因此 2^3^2 == (2^3)^2
    - 一元负号入栈前从不弹出栈顶
    Args:
        tokens: tokenize() 的输出
    Returns:
        后缀顺序的Token列表
    """
    output = []
    stack = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            output.append(token)

        elif token.type is TokenType.OPERATOR:
            op1 = token.to_operator()
            while stack and stack[-1].is_operator:
                op2 = stack[-1].to_operator()
                if op1.precedence <= op2.precedence and not op1.is_unary:
                    output.append(stack.pop())
                else:
                    break
            stack.append(token)

        elif token.is_open_parenthesis:
            stack.append(token)

        else:
            while stack and not stack[-1].is_open_parenthesis:
                output.append(stack.pop())
            if not stack:
                raise UnmatchedParenthesis("Closing parenthesis without matching '('")
            stack.pop()  # 丢弃 '('

    while stack:
        token = stack.pop()
        if token.is_open_parenthesis:
            raise UnmatchedParenthesis("Opening parenthesis without matching ')'")
        output.append(token)

    logger.debug(f"Postfix: {format_tokens(output)}")
    return output
