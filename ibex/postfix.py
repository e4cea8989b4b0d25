"""中缀 -> 后缀（逆波兰）翻译器，shunting-yard 算法"""
import logging

from ibex.errors import MismatchedParens, UnexpectedToken
from ibex.operators import OPERATOR_TABLE, precedence, is_right_associative
from ibex.token_system import TokenKind, UNARY_KINDS

logger = logging.getLogger(__name__)


def _should_pop(incoming, top):
    """栈顶操作符是否需要先于新操作符输出"""
    if top.kind not in OPERATOR_TABLE:
        return False
    prec_in = precedence(incoming.kind)
    prec_top = precedence(top.kind)
    if is_right_associative(incoming.kind):
        return prec_in < prec_top
    return prec_in <= prec_top


def generate_postfix(tokens):
    """
    把中缀Token序列翻译为后缀序列，并给每个函数标识符标注参数个数。

    使用两个辅助栈：操作符栈（操作符、左括号、待调用的函数名）
    和参数计数栈（每个未闭合的函数调用一项）。输入列表不会被修改。

    Args:
        tokens: lexer.tokenize 的输出
    Returns:
        新的后缀Token列表
    Raises:
        MismatchedParens: 括号不配对
        UnexpectedToken: 出现无法识别的Token
    """
    output = []
    op_stack = []
    narg_stack = []

    for i, token in enumerate(tokens):
        next_kind = tokens[i + 1].kind if i + 1 < len(tokens) else TokenKind.UNKNOWN
        kind = token.kind

        if kind in (TokenKind.INT, TokenKind.FLOAT):
            output.append(token)

        elif kind == TokenKind.IDENTIFIER:
            if next_kind == TokenKind.LPAREN:
                op_stack.append(token)  # 函数名
            else:
                output.append(token)  # 变量

        elif kind == TokenKind.COMMA:
            while op_stack and op_stack[-1].kind != TokenKind.LPAREN:
                output.append(op_stack.pop())
            if narg_stack:
                narg_stack[-1] += 1

        elif kind == TokenKind.LPAREN:
            # 下面是函数名则开始计数参数
            if op_stack and op_stack[-1].kind == TokenKind.IDENTIFIER:
                narg_stack.append(0 if next_kind == TokenKind.RPAREN else 1)
            op_stack.append(token)

        elif kind == TokenKind.RPAREN:
            while op_stack and op_stack[-1].kind != TokenKind.LPAREN:
                output.append(op_stack.pop())
            if not op_stack:
                logger.debug(f"Unmatched ')' at token {i}")
                raise MismatchedParens("Mismatched parentheses: unmatched ')'")
            op_stack.pop()  # 弹出左括号

            if op_stack and op_stack[-1].kind == TokenKind.IDENTIFIER:
                func = op_stack.pop()
                output.append(func.with_arg_count(narg_stack.pop()))

        elif kind in OPERATOR_TABLE:
            # 前缀一元操作符没有左操作数，不弹出任何东西
            # 与逐字的弹出规则不同：栈顶为 ^ 时 2^-3 不会下溢
            if kind not in UNARY_KINDS:
                while op_stack and _should_pop(token, op_stack[-1]):
                    output.append(op_stack.pop())
            op_stack.append(token)

        elif kind != TokenKind.END:
            logger.debug(f"Unexpected token {token.text!r} at position {i}")
            raise UnexpectedToken(token)

    # 弹出剩余操作符
    while op_stack:
        top = op_stack.pop()
        if top.kind in (TokenKind.LPAREN, TokenKind.RPAREN):
            logger.debug("Unmatched '(' left on operator stack")
            raise MismatchedParens("Mismatched parentheses: unclosed '('")
        output.append(top)

    logger.debug(f"Postfix: {' '.join(str(t) for t in output)}")
    return output


translate_to_postfix = generate_postfix
