import logging
from collections import OrderedDict
from typing import Dict, Optional

import numpy as np
import pandas as pd

from config.config import EVALUATOR_CONFIG
from ibex import (
    ExpressionError, RPNEvaluator, default_environment, generate_postfix, tokenize
)

logger = logging.getLogger(__name__)


class FormulaEvaluator:
    """
    带编译缓存的表达式求值器：同一公式只做一次词法分析和后缀翻译，
    之后可以对不同的变量取值（或DataFrame的每一行）反复求值。
    """

    def __init__(self, cache_size=None, variables=None, functions=None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG['compile_cache_size']
        self.cache_size = cache_size
        default_vars, default_funcs = default_environment()
        # 调用方传入的环境覆盖默认环境
        self.variables = {**default_vars, **(variables or {})}
        self.functions = {**default_funcs, **(functions or {})}
        # 使用有限大小的OrderedDict实现LRU缓存
        self._compile_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._compile_cache) > self.cache_size:
            # 删除最旧的条目
            self._compile_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._compile_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._compile_cache),
            'max_size': self.cache_size,
        }

    def compile(self, formula: str) -> list:
        """
        Args:
            formula: 中缀表达式文本
        Returns:
            后缀Token序列（副本，调用方可以随意修改）
        Raises:
            MismatchedParens / UnexpectedToken: 翻译失败，不会被缓存
        """
        if formula in self._compile_cache:
            # 移到末尾（最近使用）
            self._compile_cache.move_to_end(formula)
            self._cache_hits += 1
            logger.debug(f"Cache hit for formula: {formula[:50]}")
            return list(self._compile_cache[formula])

        self._cache_misses += 1
        postfix = generate_postfix(tokenize(formula))
        self._compile_cache[formula] = tuple(postfix)
        self._manage_cache()
        return postfix

    def evaluate(self, formula: str, variables: Optional[Dict[str, float]] = None) -> float:
        """用本求值器的环境求值，variables 覆盖同名变量（只对本次调用有效）"""
        postfix = self.compile(formula)
        if variables:
            env = {**self.variables, **variables}
        else:
            env = self.variables
        return RPNEvaluator.evaluate(postfix, env, self.functions)

    def evaluate_frame(self, formula: str, data: pd.DataFrame) -> pd.Series:
        """
        对DataFrame的每一行求值，列名作为变量名。

        Args:
            formula: 中缀表达式文本
            data: DataFrame，非数值列被忽略
        Returns:
            与data同索引的Series；某一行求值失败时该行为NaN
        Raises:
            翻译阶段的错误与行无关，直接抛出
        """
        postfix = self.compile(formula)
        # 只有数值列可以作为变量
        numeric = data.select_dtypes(include=[np.number, 'bool'])
        columns = [str(col) for col in numeric.columns]
        values = numeric.to_numpy(dtype=np.float64, na_value=np.nan)

        # 变量优先于函数查找，同名列会遮蔽函数
        shadowed = [col for col in columns if col in self.functions]
        if shadowed:
            logger.warning(f"Columns shadow functions of the same name: {shadowed}")

        results = np.full(len(data), np.nan, dtype=np.float64)
        failures = 0
        max_logged = EVALUATOR_CONFIG['log_failed_rows']
        env = dict(self.variables)

        for row_idx, row in enumerate(values):
            env.update(zip(columns, row.tolist()))
            try:
                results[row_idx] = RPNEvaluator.evaluate(postfix, env, self.functions)
            except ExpressionError as e:
                failures += 1
                if failures <= max_logged:
                    logger.debug(f"Row {data.index[row_idx]!r} failed: {e}")

        if failures:
            logger.warning(f"{failures}/{len(data)} rows failed for formula: {formula[:50]}")

        return pd.Series(results, index=data.index, name=formula)

    def apply_formulas(self, data: pd.DataFrame, formulas) -> pd.DataFrame:
        """
        把多个公式应用到数据集，返回包含原始列和新公式列的DataFrame
        """
        transformed = data.copy()
        for formula in formulas:
            transformed[formula] = self.evaluate_frame(formula, data)
        return transformed
