import logging
import threading
from collections import OrderedDict
from typing import List, Optional, Tuple

from config.config import EVALUATOR_CONFIG, CACHE_CONFIG
from rpn import RPNEvaluator, RPNValidator, PostfixError, ExpressionTooLongError, tokenize

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size=None, strict_decimal=None, strict_arithmetic=None,
                 max_expression_length=None, max_tokens=None):
        self.rpn_evaluator = RPNEvaluator
        self.cache_size = CACHE_CONFIG['cache_size'] if cache_size is None else cache_size
        self.strict_decimal = (EVALUATOR_CONFIG['strict_decimal']
                               if strict_decimal is None else strict_decimal)
        self.strict_arithmetic = (EVALUATOR_CONFIG['strict_arithmetic']
                                  if strict_arithmetic is None else strict_arithmetic)
        self.max_expression_length = (EVALUATOR_CONFIG['max_expression_length']
                                      if max_expression_length is None else max_expression_length)
        self.max_tokens = EVALUATOR_CONFIG['max_tokens'] if max_tokens is None else max_tokens

        # 使用有限大小的OrderedDict实现LRU缓存，缓存成功结果和失败原因
        self._result_cache = OrderedDict()
        self._cache_lock = threading.Lock()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        with self._cache_lock:
            self._result_cache.clear()
            logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
            self._cache_hits = 0
            self._cache_misses = 0

    def cache_info(self) -> dict:
        with self._cache_lock:
            return {
                'hits': self._cache_hits,
                'misses': self._cache_misses,
                'size': len(self._result_cache),
                'max_size': self.cache_size,
            }

    def evaluate(self, expression: str) -> Tuple[float, bool]:
        """
        Args:
            expression: 空白分隔的后缀表达式
        Returns:
            (value, error)：成功时 error 为 False；失败时 value 为 NaN，error 为 True
        """
        if not isinstance(expression, str):
            logger.warning(f"Rejected non-string expression of type {type(expression).__name__}")
            return float('nan'), True

        cached = self._cache_lookup(expression)
        if cached is not None:
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return cached

        try:
            token_sequence = self._parse_tokens(expression)

            # 结构不完整的表达式不进入栈机，直接返回NaN
            if not self._is_complete_expression(token_sequence):
                outcome = (float('nan'), True)
            else:
                result = self.rpn_evaluator.evaluate(
                    token_sequence,
                    strict_arithmetic=self.strict_arithmetic,
                )
                outcome = (result, False)
        except PostfixError as e:
            logger.warning(f"Rejected expression '{expression[:50]}': {type(e).__name__}: {e}")
            outcome = (float('nan'), True)

        self._cache_store(expression, outcome)
        return outcome

    def evaluate_or_raise(self, expression: str, trace: Optional[List[str]] = None) -> float:
        """求值，失败时抛出 PostfixError"""
        if not isinstance(expression, str):
            raise TypeError(f"expression must be a str, not {type(expression).__name__}")

        return self.rpn_evaluator.evaluate(
            self._parse_tokens(expression),
            strict_arithmetic=self.strict_arithmetic,
            trace=trace,
        )

    def _parse_tokens(self, expression: str) -> list:
        if len(expression) > self.max_expression_length:
            raise ExpressionTooLongError(
                f"expression too long: {len(expression)} > {self.max_expression_length} characters")

        token_sequence = tokenize(expression, strict_decimal=self.strict_decimal)
        if len(token_sequence) > self.max_tokens:
            raise ExpressionTooLongError(
                f"too many tokens: {len(token_sequence)} > {self.max_tokens}")
        return token_sequence

    def _is_complete_expression(self, token_sequence: list) -> bool:
        if RPNValidator.is_complete_expression(token_sequence):
            return True

        invalid_position = RPNValidator.first_invalid_position(token_sequence)
        if invalid_position is not None:
            logger.warning(f"Rejected expression: invalid token "
                           f"'{token_sequence[invalid_position].text}' at position {invalid_position}")
        else:
            logger.warning(f"Rejected expression: incomplete structure, "
                           f"stack size {RPNValidator.calculate_stack_size(token_sequence)}")
        return False

    def evaluate_with_trace(self, expression: str) -> Tuple[float, List[str]]:
        """返回 (result, steps)，不使用缓存"""
        steps: List[str] = []
        result = self.evaluate_or_raise(expression, trace=steps)
        steps.append(f"RESULT = {result!r}")
        return result, steps

    def _cache_lookup(self, expression):
        if self.cache_size <= 0:
            return None
        with self._cache_lock:
            if expression in self._result_cache:
                # 移到末尾（最近使用）
                self._result_cache.move_to_end(expression)
                self._cache_hits += 1
                return self._result_cache[expression]
            self._cache_misses += 1
            return None

    def _cache_store(self, expression, outcome):
        if self.cache_size <= 0:
            return
        with self._cache_lock:
            self._result_cache[expression] = outcome
            self._manage_cache()


_default_evaluator = ExpressionEvaluator()


def evaluate(expression: str) -> Tuple[float, bool]:
    """模块级入口：Evaluate(expression) -> (value, error)"""
    return _default_evaluator.evaluate(expression)
