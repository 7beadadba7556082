"""utils/formatting.py"""
import numbers

import numpy as np

from core.errors import InvalidNumberLiteral


def format_decimal(value, min_digits=1):
    """
    数值 -> 规范十进制文本（定点表示，无指数）
    3 -> '3.0', 1e-5 -> '0.00001', -2.5 -> '-2.5'
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Variable value must be a real number, got {type(value).__name__}")
    try:
        value = float(value)
    except OverflowError:
        raise InvalidNumberLiteral("Integer value out of float range") from None
    if not np.isfinite(value):
        raise InvalidNumberLiteral(f"Non-finite value has no decimal form: {value}")
    return np.format_float_positional(value, unique=True, trim='0', min_digits=min_digits)
