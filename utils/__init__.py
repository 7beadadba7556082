"""工具模块"""
from .formatting import format_decimal

__all__ = ['format_decimal']
