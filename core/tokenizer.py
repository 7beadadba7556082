"""分词器 - 将已代入变量的表达式文本转为Token序列"""
import logging

from core.operators import Operator
from core.token_system import Token

logger = logging.getLogger(__name__)

NUMBER_CHARS = '0123456789.'


def _is_unary_position(tokens):
    """'-' 出现在开头、左括号之后或另一个操作符之后时为一元负号"""
    if not tokens:
        return True
    last = tokens[-1]
    return last.is_open_parenthesis or last.is_operator


def tokenize(text):
    """
    单遍扫描，不回溯
    Args:
        text: 表达式文本（变量已替换为数字）
    Returns:
        Token列表
    """
    tokens = []
    number_buffer = []  # 数字字符缓冲，不校验小数点个数
    ignored = 0

    for char in text:
        if char in NUMBER_CHARS:
            number_buffer.append(char)
            continue

        if number_buffer:
            tokens.append(Token.number(''.join(number_buffer)))
            number_buffer = []

        if char in '()':
            tokens.append(Token.parenthesis(char == '('))
        elif Operator.from_symbol(char) is not None:
            is_unary = char == '-' and _is_unary_position(tokens)
            tokens.append(Token.operator(char, is_unary=is_unary))
        else:
            ignored += 1

    if number_buffer:
        tokens.append(Token.number(''.join(number_buffer)))

    if ignored:
        logger.debug(f"Ignored {ignored} unrecognized characters in {text!r}")
    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens
