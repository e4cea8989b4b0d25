"""ibex/pipeline.py - 一次性字符串求值"""
import logging

from ibex.lexer import tokenize
from ibex.postfix import generate_postfix
from ibex.rpn_evaluator import RPNEvaluator
from ibex.functions import default_environment

logger = logging.getLogger(__name__)


def evaluate_text(text):
    """
    tokenize -> generate_postfix -> 默认环境 -> evaluate。
    无状态；需要在多次调用间保留变量时，直接使用三个阶段并传入自己的环境。
    """
    postfix = generate_postfix(tokenize(text))
    variables, functions = default_environment()
    result = RPNEvaluator.evaluate(postfix, variables, functions)
    logger.debug(f"{text!r} = {result!r}")
    return result
