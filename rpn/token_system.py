"""rpn/token_system.py"""
from dataclasses import dataclass
from enum import Enum
import re
from typing import List, Optional

from rpn.operators import Operator


class TokenType(Enum):
    OPERAND = "operand"    # 操作数（数字字面量）
    OPERATOR = "operator"  # 操作符
    INVALID = "invalid"    # 其他


@dataclass(frozen=True)
class Token:
    text: str
    position: int
    type: TokenType
    value: Optional[float] = None
    operator: Optional[Operator] = None

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR


# 操作符定义字典：符号 -> Operator
OPERATOR_DEFINITIONS = {op.symbol: op for op in Operator}

# 宽松模式下取最长数字前缀，例如 '1.2.3' -> '1.2'
_NUMERIC_PREFIX_RE = re.compile(r"-?\d*(?:\.\d*)?")


def is_operator(token: str) -> bool:
    """token 必须与五个操作符之一完全相同"""
    return token in OPERATOR_DEFINITIONS


def is_operand(token: str, strict_decimal: bool = True) -> bool:
    """
    判断token是否为合法操作数:
        a. 非空且不是操作符
        b. 首字符为数字或负号，负号只能出现在开头
        c. 其余字符只能是数字或小数点
        d. 至少包含一个数字
        e. strict_decimal 时小数点最多出现一次
    """
    if not token or is_operator(token):
        return False

    first = token[0]
    if not (first.isdigit() and first.isascii()) and first != '-':
        return False

    has_digit = first.isdigit()
    decimal_present = False
    for c in token[1:]:
        if c == '.':
            if decimal_present and strict_decimal:
                return False
            decimal_present = True
        elif c.isascii() and c.isdigit():
            has_digit = True
        else:
            return False
    return has_digit


def parse_operand(token: str) -> float:
    """把操作数token转换为float；宽松模式下的多小数点token只取数字前缀"""
    try:
        return float(token)
    except ValueError:
        prefix = _NUMERIC_PREFIX_RE.match(token).group(0)
        return float(prefix)


def classify(token: str, position: int, strict_decimal: bool = True) -> Token:
    """为单个token确定类型"""
    if is_operator(token):
        return Token(token, position, TokenType.OPERATOR, operator=OPERATOR_DEFINITIONS[token])
    if is_operand(token, strict_decimal=strict_decimal):
        try:
            value = parse_operand(token)
        except ValueError:
            # 宽松模式下前缀中没有数字，例如 '-..5'
            return Token(token, position, TokenType.INVALID)
        return Token(token, position, TokenType.OPERAND, value=value)
    return Token(token, position, TokenType.INVALID)


def tokenize(expression: str, strict_decimal: bool = True) -> List[Token]:
    """按空白切分并逐个分类；空输入返回空列表，本函数不会失败"""
    return [classify(text, i, strict_decimal=strict_decimal)
            for i, text in enumerate(expression.split())]


class RPNValidator:
    """只模拟栈深度、不计算数值的结构检查"""

    @staticmethod
    def calculate_stack_size(token_sequence):
        """计算当前栈中的元素数量（操作数+1，操作符-1）"""
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                stack_size += 1
            elif token.type == TokenType.OPERATOR:
                stack_size -= 1
        return stack_size

    @staticmethod
    def first_invalid_position(token_sequence):
        """返回第一个INVALID token的位置，没有则返回None"""
        for token in token_sequence:
            if token.type == TokenType.INVALID:
                return token.position
        return None

    @staticmethod
    def is_complete_expression(token_sequence):
        """所有token合法、无下溢、至少用过一个操作符且最终栈==1"""
        if not token_sequence:
            return False

        stack_size = 0
        used_operator = False
        for i, token in enumerate(token_sequence):
            if token.type == TokenType.OPERAND:
                stack_size += 1
            elif token.type == TokenType.OPERATOR:
                # 前两个位置只能是操作数
                if i < 2 or stack_size < 2:
                    return False
                used_operator = True
                stack_size -= 1
            else:
                return False

        return used_operator and stack_size == 1
