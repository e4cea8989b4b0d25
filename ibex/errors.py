"""ibex/errors.py - 表达式求值各阶段的错误类型"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""


class MismatchedParens(ExpressionError):
    """括号不匹配（翻译阶段检测）"""

    def __init__(self, message="Mismatched parentheses"):
        super().__init__(message)


class UnexpectedToken(ExpressionError):
    """无法识别的Token进入了翻译器"""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Unexpected token: {token.text!r}")


class UnknownSymbol(ExpressionError):
    """标识符既不是变量也不是函数"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown variable or function: {name}")


class StackUnderflow(ExpressionError):
    """操作符缺少操作数"""

    def __init__(self, token, needed, available):
        self.token = token
        self.needed = needed
        self.available = available
        super().__init__(
            f"Insufficient operands for {token.text!r}: need {needed}, have {available}"
        )


class MalformedPostfix(ExpressionError):
    """后缀序列无法归约为唯一结果，或含有求值阶段非法的Token"""


class InvalidArity(ExpressionError):
    """内置函数收到错误数量的参数"""

    def __init__(self, name, expected, received):
        self.name = name
        self.expected = expected
        self.received = received
        super().__init__(f"{name} expects {expected} argument(s) (got {received})")
