"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from ibex.errors import MalformedPostfix, StackUnderflow, UnknownSymbol
from ibex.operators import BINARY_OPERATIONS, UNARY_OPERATIONS
from ibex.token_system import TokenKind, LITERAL_KINDS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """用显式操作数栈执行后缀序列"""

    @staticmethod
    def evaluate(token_sequence, variables, functions):
        """
        评估后缀表达式
        Args:
            token_sequence: generate_postfix 产生的后缀Token序列
            variables: 变量名 -> float
            functions: 函数名 -> callable(list[float]) -> float
        Returns:
            float结果
        Raises:
            UnknownSymbol / StackUnderflow / MalformedPostfix，以及函数自身抛出的 InvalidArity
        """
        stack = []

        for token in token_sequence:
            kind = token.kind

            if kind in LITERAL_KINDS:
                stack.append(float(token.text))

            elif kind == TokenKind.IDENTIFIER:
                # 先查变量，再查函数
                if token.text in variables:
                    stack.append(float(variables[token.text]))
                    continue

                func = functions.get(token.text)
                if func is None:
                    logger.debug(f"Unknown variable or function: {token.text}")
                    raise UnknownSymbol(token.text)

                n = token.arg_count
                if len(stack) < n:
                    logger.debug(f"Insufficient operands for {token.text}")
                    raise StackUnderflow(token, n, len(stack))
                # 按原来从左到右的顺序还原参数
                args = stack[len(stack) - n:]
                del stack[len(stack) - n:]
                stack.append(float(func(args)))

            elif kind in BINARY_OPERATIONS:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for binary operator {token.text}")
                    raise StackUnderflow(token, 2, len(stack))
                rhs = stack.pop()
                lhs = stack.pop()
                stack.append(BINARY_OPERATIONS[kind](lhs, rhs))

            elif kind in UNARY_OPERATIONS:
                if not stack:
                    logger.debug(f"Insufficient operands for unary operator {token.text}")
                    raise StackUnderflow(token, 1, 0)
                stack.append(UNARY_OPERATIONS[kind](stack.pop()))

            else:
                logger.debug(f"Unexpected token in RPN: {token.text!r}")
                raise MalformedPostfix(f"Unexpected token in RPN: {token.text!r} ({kind.name})")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedPostfix(
                f"Invalid RPN expression: stack has {len(stack)} elements, expected 1"
            )

        return stack[0]


def evaluate(postfix, variables, functions):
    return RPNEvaluator.evaluate(postfix, variables, functions)
