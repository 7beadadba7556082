"""变量代入 - 将 name -> value 按调用方顺序逐个做文本替换"""
import logging

from config.config import EVALUATOR_CONFIG
from utils.formatting import format_decimal

logger = logging.getLogger(__name__)


def substitute_variables(expression, variables=None):
    """
    对每个变量名做全量文本替换，按映射的迭代顺序依次进行。
    变量名互为子串时结果取决于顺序，由调用方保证。

    Args:
        expression: 原始表达式文本
        variables: {name: value}，可为None
    Returns:
        代入后的表达式文本
    """
    if not variables:
        return expression

    processed = expression
    for name, value in variables.items():
        if not name:
            logger.warning("Skipping variable with empty name")
            continue
        text = format_decimal(value, min_digits=EVALUATOR_CONFIG["decimal_min_digits"])
        processed = processed.replace(name, text)
        logger.debug(f"Substituted {name} -> {text}")

    return processed
