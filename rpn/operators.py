"""rpn/operators.py"""
from enum import Enum
import logging

import numpy as np

from rpn.errors import DivisionByZeroError, DomainError, NumericOverflowError

logger = logging.getLogger(__name__)


class Operator(Enum):
    """固定的二元操作符集合，value为符号"""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    @property
    def symbol(self):
        return self.value


class Operators:
    """所有操作符的静态方法集合，方法名与Operator成员名（小写）一致"""

    # 二元操作符========================================
    # operand1 为左操作数（先入栈），operand2 为右操作数（后入栈）

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def subtract(operand1, operand2):
        """减法操作符"""
        return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def multiply(operand1, operand2):
        """乘法操作符"""
        return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def divide(operand1, operand2):
        """除法操作符，除零按IEEE语义得到inf/nan"""
        return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def power(operand1, operand2):
        """幂运算: operand1 ** operand2"""
        return np.power(np.float64(operand1), np.float64(operand2))

    # =================================
    @staticmethod
    def apply(operator, operand1, operand2, strict_arithmetic=True):
        """
        执行一次二元运算
        Args:
            operator: Operator成员
            operand1: 左操作数
            operand2: 右操作数
            strict_arithmetic: True时把除零/NaN/溢出转换为具名错误
        Returns:
            np.float64 结果
        """
        op_method = getattr(Operators, operator.name.lower())

        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            result = op_method(operand1, operand2)

        if not strict_arithmetic or np.isfinite(result):
            return result

        inputs_finite = np.isfinite(operand1) and np.isfinite(operand2)

        if operator is Operator.DIVIDE and operand2 == 0:
            raise DivisionByZeroError(f"division by zero: {operand1} / {operand2}",
                                      token=operator.symbol)
        if np.isnan(result) and not (np.isnan(operand1) or np.isnan(operand2)):
            raise DomainError(
                f"result of {operand1} {operator.symbol} {operand2} is not a number",
                token=operator.symbol)
        if np.isinf(result) and inputs_finite:
            raise NumericOverflowError(
                f"result of {operand1} {operator.symbol} {operand2} is not finite",
                token=operator.symbol)

        # 输入本身已非有限值（只会在strict关闭时的上游产生），原样传播
        logger.debug(f"Non-finite operands propagated through {operator.symbol}")
        return result
