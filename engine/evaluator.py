import logging

import numpy as np
import pandas as pd

from core import RPNEvaluator, ExpressionError, tokenize, to_postfix
from engine.substitution import substitute_variables

logger = logging.getLogger(__name__)

ERROR_POLICIES = ('raise', 'coerce')


class ExpressionEvaluator:
    """无状态的求值管线：代入 -> 分词 -> 后缀转换 -> RPN求值"""

    def __init__(self):
        self.rpn_evaluator = RPNEvaluator

    def substitute(self, expression, variables=None):
        return substitute_variables(expression, variables)

    def tokenize(self, expression, variables=None):
        return tokenize(self.substitute(expression, variables))

    def to_postfix(self, expression, variables=None):
        return to_postfix(self.tokenize(expression, variables))

    def evaluate(self, expression, variables=None):
        """
        Args:
            expression: 中缀表达式文本
            variables: {name: value}，按迭代顺序代入
        Returns:
            float结果；任何阶段的错误以ExpressionError子类原样抛出
        """
        postfix = self.to_postfix(expression, variables)
        return self.rpn_evaluator.evaluate(postfix)

    def evaluate_frame(self, expression, frame, errors='raise'):
        """
        对DataFrame每一行求值，列名为变量名，列顺序即代入顺序

        Args:
            expression: 中缀表达式文本
            frame: 变量取值表
            errors: 'raise' 遇错即抛出；'coerce' 出错行记为NaN
        Returns:
            与frame索引对齐的float Series
        """
        if errors not in ERROR_POLICIES:
            raise ValueError(f"errors must be one of {ERROR_POLICIES}, got {errors!r}")

        columns = list(frame.columns)
        results = np.full(len(frame), np.nan)
        failed = 0

        for i, row in enumerate(frame.itertuples(index=False, name=None)):
            variables = dict(zip(columns, row))
            try:
                results[i] = self.evaluate(expression, variables)
            except (ExpressionError, TypeError) as e:
                if errors == 'raise':
                    raise
                failed += 1
                logger.warning(f"Row {frame.index[i]!r}: {type(e).__name__}: {e}")

        if failed:
            logger.warning(f"{failed}/{len(frame)} rows failed for expression '{expression}'")
        return pd.Series(results, index=frame.index, name=expression, dtype=float)


def evaluate(expression, variables=None):
    """求值中缀表达式，见 ExpressionEvaluator.evaluate"""
    return ExpressionEvaluator().evaluate(expression, variables)
