"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from rpn.errors import (
    ArithmeticDomainError,
    EmptyExpressionError,
    LeftoverOperandsError,
    MalformedExpressionError,
    NoOperatorAppliedError,
    NumericOverflowError,
    StackUnderflowError,
)
from rpn.operators import Operators
from rpn.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, strict_arithmetic=True, trace=None):
        """
        评估RPN表达式，遇到第一个非法token立即失败
        Args:
            token_sequence: tokenize() 得到的Token序列
            strict_arithmetic: 是否把除零/NaN/溢出视为错误
            trace: 可选list，记录每一步的文字描述
        Returns:
            float 结果
        Raises:
            PostfixError 的各个子类
        """
        stack = []
        used_operator = False

        def record(step):
            logger.debug(step)
            if trace is not None:
                trace.append(step)

        for token in token_sequence:
            i = token.position

            if token.type == TokenType.OPERAND:
                value = np.float64(token.value)
                if strict_arithmetic and not np.isfinite(value):
                    raise NumericOverflowError(
                        f"operand '{token.text}' at position {i} is out of range",
                        position=i, token=token.text)
                stack.append(value)
                record(f"PUSH {float(value)!r}")
                continue

            # 前两个位置只能是操作数
            if i < 2 or token.type == TokenType.INVALID:
                if token.type == TokenType.OPERATOR:
                    raise StackUnderflowError(
                        f"operator '{token.text}' at position {i} needs two operands",
                        position=i, token=token.text)
                raise MalformedExpressionError(
                    f"invalid postfix expression: unexpected token '{token.text}' at position {i}",
                    position=i, token=token.text)

            # ================== 二元操作符处理 ==================
            if len(stack) < 2:
                raise StackUnderflowError(
                    f"operator '{token.text}' at position {i} needs two operands, "
                    f"stack has {len(stack)}",
                    position=i, token=token.text)

            operand2 = stack.pop()
            operand1 = stack.pop()
            try:
                result = Operators.apply(token.operator, operand1, operand2,
                                         strict_arithmetic=strict_arithmetic)
            except ArithmeticDomainError as e:
                # Operators 不知道token位置，这里补上
                e.position = i
                raise
            stack.append(result)
            used_operator = True
            record(f"{token.operator.name} {float(operand1)!r} {token.text} "
                   f"{float(operand2)!r} = {float(result)!r}")

        # 返回结果处理
        if not token_sequence:
            raise EmptyExpressionError("empty expression")
        if not used_operator:
            raise NoOperatorAppliedError(
                f"no operator applied in expression of {len(token_sequence)} token(s)")
        if len(stack) > 1:
            logger.debug(f"Stack content after evaluation: {[float(v) for v in stack]}")
            raise LeftoverOperandsError(
                f"{len(stack)} values left on stack after evaluation, expected 1")

        return float(stack[0])
