"""Engine模块 - 变量代入和表达式求值"""
from .evaluator import ExpressionEvaluator, evaluate
from .substitution import substitute_variables

__all__ = ['ExpressionEvaluator', 'evaluate', 'substitute_variables']
