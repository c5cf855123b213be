"""对调用方公开的错误类型"""


class PostfixError(ValueError):
    """所有后缀表达式求值错误的基类"""

    def __init__(self, message, position=None, token=None):
        super().__init__(message)
        self.position = position
        self.token = token


class ExpressionTooLongError(PostfixError):
    """输入超过长度或token数量上限"""
    pass


class MalformedExpressionError(PostfixError):
    """invalid postfix expression：格式错误"""
    pass


class EmptyExpressionError(MalformedExpressionError):
    pass


class StackUnderflowError(MalformedExpressionError):
    """操作符出现时栈中不足两个值"""
    pass


class LeftoverOperandsError(MalformedExpressionError):
    """求值结束后栈中剩余多个值"""
    pass


class NoOperatorAppliedError(MalformedExpressionError):
    """整个表达式没有执行过任何操作符"""
    pass


class ArithmeticDomainError(PostfixError):
    """算术结果不是有限值"""
    pass


class DivisionByZeroError(ArithmeticDomainError):
    pass


class DomainError(ArithmeticDomainError):
    """例如负数的分数次幂"""
    pass


class NumericOverflowError(ArithmeticDomainError):
    pass
