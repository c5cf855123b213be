"""核心模块 - Token系统、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, RPNValidator,
    tokenize, classify, is_operator, is_operand, parse_operand
)
from .operators import Operator, Operators
from .rpn_evaluator import RPNEvaluator
from .errors import (
    PostfixError, ExpressionTooLongError, MalformedExpressionError,
    EmptyExpressionError, StackUnderflowError, LeftoverOperandsError,
    NoOperatorAppliedError, ArithmeticDomainError, DivisionByZeroError,
    DomainError, NumericOverflowError
)

__all__ = [
    'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'RPNValidator',
    'tokenize', 'classify', 'is_operator', 'is_operand', 'parse_operand',
    'Operator', 'Operators', 'RPNEvaluator',
    'PostfixError', 'ExpressionTooLongError', 'MalformedExpressionError',
    'EmptyExpressionError', 'StackUnderflowError', 'LeftoverOperandsError',
    'NoOperatorAppliedError', 'ArithmeticDomainError', 'DivisionByZeroError',
    'DomainError', 'NumericOverflowError'
]
