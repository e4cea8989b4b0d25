"""ibex/operators.py"""
import logging
from types import MappingProxyType
from typing import NamedTuple

import numpy as np

from ibex.token_system import TokenKind

logger = logging.getLogger(__name__)


class OperatorInfo(NamedTuple):
    precedence: int
    right_associative: bool


# 优先级表（数字越大结合越紧），进程启动时构建，只读
OPERATOR_TABLE = MappingProxyType({
    TokenKind.POW: OperatorInfo(8, True),
    TokenKind.UNARY_PLUS: OperatorInfo(7, True),
    TokenKind.UNARY_MINUS: OperatorInfo(7, True),
    TokenKind.NOT: OperatorInfo(7, True),
    TokenKind.TIMES: OperatorInfo(5, False),
    TokenKind.DIV: OperatorInfo(5, False),
    TokenKind.PLUS: OperatorInfo(4, False),
    TokenKind.MINUS: OperatorInfo(4, False),
    TokenKind.EQ: OperatorInfo(3, False),
    TokenKind.NEQ: OperatorInfo(3, False),
    TokenKind.LT: OperatorInfo(3, False),
    TokenKind.LEQ: OperatorInfo(3, False),
    TokenKind.GT: OperatorInfo(3, False),
    TokenKind.GEQ: OperatorInfo(3, False),
    TokenKind.AND: OperatorInfo(2, False),
    TokenKind.OR: OperatorInfo(1, False),
})


def precedence(kind):
    info = OPERATOR_TABLE.get(kind)
    return info.precedence if info is not None else -1


def is_right_associative(kind):
    info = OPERATOR_TABLE.get(kind)
    return info is not None and info.right_associative


def _truth(value):
    return 1.0 if value else 0.0


class Operators:
    """所有操作符的静态方法集合，输入输出均为float"""

    # 二元操作符========================================
    @staticmethod
    def add(lhs, rhs):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(lhs) + np.float64(rhs))

    @staticmethod
    def sub(lhs, rhs):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(lhs) - np.float64(rhs))

    @staticmethod
    def mul(lhs, rhs):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(lhs) * np.float64(rhs))

    @staticmethod
    def div(lhs, rhs):
        """IEEE除法：x/0 -> ±inf，0/0 -> nan，不做保护"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return float(np.true_divide(np.float64(lhs), np.float64(rhs)))

    @staticmethod
    def pow(lhs, rhs):
        """溢出得到inf，负数的分数次幂得到nan"""
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            return float(np.power(np.float64(lhs), np.float64(rhs)))

    # 比较操作符：真返回1.0，假返回0.0
    @staticmethod
    def eq(lhs, rhs):
        return _truth(lhs == rhs)

    @staticmethod
    def neq(lhs, rhs):
        return _truth(lhs != rhs)

    @staticmethod
    def less(lhs, rhs):
        return _truth(lhs < rhs)

    @staticmethod
    def less_equal(lhs, rhs):
        return _truth(lhs <= rhs)

    @staticmethod
    def greater(lhs, rhs):
        return _truth(lhs > rhs)

    @staticmethod
    def greater_equal(lhs, rhs):
        return _truth(lhs >= rhs)

    # 逻辑操作符：非零即真，两侧都已求值（无短路）
    @staticmethod
    def logical_and(lhs, rhs):
        return _truth(lhs != 0.0 and rhs != 0.0)

    @staticmethod
    def logical_or(lhs, rhs):
        return _truth(lhs != 0.0 or rhs != 0.0)

    # 一元操作符====================
    @staticmethod
    def pos(operand):
        return float(operand)

    @staticmethod
    def neg(operand):
        return float(np.negative(np.float64(operand)))

    @staticmethod
    def logical_not(operand):
        return _truth(operand == 0.0)


BINARY_OPERATIONS = MappingProxyType({
    TokenKind.PLUS: Operators.add,
    TokenKind.MINUS: Operators.sub,
    TokenKind.TIMES: Operators.mul,
    TokenKind.DIV: Operators.div,
    TokenKind.POW: Operators.pow,
    TokenKind.EQ: Operators.eq,
    TokenKind.NEQ: Operators.neq,
    TokenKind.LT: Operators.less,
    TokenKind.LEQ: Operators.less_equal,
    TokenKind.GT: Operators.greater,
    TokenKind.GEQ: Operators.greater_equal,
    TokenKind.AND: Operators.logical_and,
    TokenKind.OR: Operators.logical_or,
})

UNARY_OPERATIONS = MappingProxyType({
    TokenKind.UNARY_PLUS: Operators.pos,
    TokenKind.UNARY_MINUS: Operators.neg,
    TokenKind.NOT: Operators.logical_not,
})
