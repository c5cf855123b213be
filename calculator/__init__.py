"""计算器模块 - 表达式求值服务"""
from .expression_evaluator import ExpressionEvaluator, evaluate

__all__ = ['ExpressionEvaluator', 'evaluate']
