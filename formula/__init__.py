"""公式模块 - 带缓存的批量求值"""
from .evaluator import FormulaEvaluator

__all__ = ['FormulaEvaluator']
