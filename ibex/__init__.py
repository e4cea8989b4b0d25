"""ibex - 表达式求值：词法分析、后缀翻译和栈式求值"""
from .token_system import Token, TokenKind, RPNValidator
from .errors import (
    ExpressionError, MismatchedParens, UnexpectedToken, UnknownSymbol,
    StackUnderflow, MalformedPostfix, InvalidArity
)
from .lexer import tokenize
from .operators import OPERATOR_TABLE, OperatorInfo, Operators
from .postfix import generate_postfix, translate_to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate
from .functions import register_commons, default_environment, make_function
from .pipeline import evaluate_text

__all__ = [
    'Token', 'TokenKind', 'RPNValidator',
    'ExpressionError', 'MismatchedParens', 'UnexpectedToken', 'UnknownSymbol',
    'StackUnderflow', 'MalformedPostfix', 'InvalidArity',
    'tokenize', 'OPERATOR_TABLE', 'OperatorInfo', 'Operators',
    'generate_postfix', 'translate_to_postfix', 'RPNEvaluator', 'evaluate',
    'register_commons', 'default_environment', 'make_function', 'evaluate_text'
]
