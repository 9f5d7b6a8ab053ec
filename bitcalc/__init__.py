"""
Calculator for 64-bit integer arithmetic and bitwise expressions.
"""
from .calculator import evaluate
from .exceptions import CalcError
from .values import CalcValue, format_value

__all__ = ["evaluate", "CalcError", "CalcValue", "format_value"]
