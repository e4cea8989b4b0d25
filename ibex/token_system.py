"""ibex/token_system.py"""
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    # 操作数
    INT = "int"
    FLOAT = "float"
    IDENTIFIER = "identifier"

    # 分组
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"

    # 二元算术
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIV = "/"
    POW = "^"

    # 一元
    UNARY_PLUS = "u+"
    UNARY_MINUS = "u-"
    NOT = "!"

    # 逻辑
    AND = "&&"
    OR = "||"

    # 比较
    EQ = "=="
    NEQ = "!="
    LT = "<"
    LEQ = "<="
    GT = ">"
    GEQ = ">="

    # 哨兵
    UNKNOWN = "unknown"
    END = "end"


@dataclass(frozen=True)
class Token:
    """
    词法单元，不可变，按 (kind, text, arg_count) 结构相等。
    arg_count 只对后缀序列中的函数标识符有意义，其余为0。
    """
    kind: TokenKind
    text: str
    arg_count: int = 0

    def with_arg_count(self, arg_count):
        """返回带有参数个数的新Token（用于函数调用）"""
        return Token(self.kind, self.text, arg_count)

    def __str__(self):
        if self.kind == TokenKind.IDENTIFIER and self.arg_count:
            return f"{self.text}/{self.arg_count}"
        return self.text


LITERAL_KINDS = frozenset({TokenKind.INT, TokenKind.FLOAT})

BINARY_KINDS = frozenset({
    TokenKind.PLUS, TokenKind.MINUS, TokenKind.TIMES, TokenKind.DIV, TokenKind.POW,
    TokenKind.AND, TokenKind.OR,
    TokenKind.EQ, TokenKind.NEQ, TokenKind.LT, TokenKind.LEQ, TokenKind.GT, TokenKind.GEQ,
})

UNARY_KINDS = frozenset({TokenKind.UNARY_PLUS, TokenKind.UNARY_MINUS, TokenKind.NOT})

# 单字符直接映射
SINGLE_CHAR_TOKENS = {
    ',': TokenKind.COMMA,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    '*': TokenKind.TIMES,
    '/': TokenKind.DIV,
    '^': TokenKind.POW,
}

# 双字符操作符: 首字符 -> (第二字符, 双字符类型, 单字符回退类型或None)
TWO_CHAR_TOKENS = {
    '!': ('=', TokenKind.NEQ, TokenKind.NOT),
    '<': ('=', TokenKind.LEQ, TokenKind.LT),
    '>': ('=', TokenKind.GEQ, TokenKind.GT),
    '=': ('=', TokenKind.EQ, None),
    '|': ('|', TokenKind.OR, None),
    '&': ('&', TokenKind.AND, None),
}

END_TOKEN = Token(TokenKind.END, "")


def is_operator(token):
    return token.kind in BINARY_KINDS or token.kind in UNARY_KINDS


class RPNValidator:
    """不求值，只模拟操作数栈深度来检查后缀序列"""

    @staticmethod
    def stack_effect(token):
        """单个Token对栈深度的净影响，非法Token返回None"""
        if token.kind in LITERAL_KINDS:
            return 1
        if token.kind == TokenKind.IDENTIFIER:
            # 变量或函数调用：弹出arg_count个，压入1个
            return 1 - token.arg_count
        if token.kind in BINARY_KINDS:
            return -1
        if token.kind in UNARY_KINDS:
            return 0
        return None

    @staticmethod
    def required_operands(token):
        if token.kind in BINARY_KINDS:
            return 2
        if token.kind in UNARY_KINDS:
            return 1
        if token.kind == TokenKind.IDENTIFIER:
            return token.arg_count
        return 0

    @staticmethod
    def calculate_stack_size(token_sequence):
        """计算后缀序列执行完后栈中的元素数量；下溢或非法Token时返回None"""
        stack_size = 0
        for token in token_sequence:
            effect = RPNValidator.stack_effect(token)
            if effect is None:
                return None
            if stack_size < RPNValidator.required_operands(token):
                return None
            stack_size += effect
        return stack_size

    @staticmethod
    def is_complete(token_sequence):
        """完整表达式应该正好留下1个结果"""
        return RPNValidator.calculate_stack_size(token_sequence) == 1
