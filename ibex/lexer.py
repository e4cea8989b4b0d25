"""词法分析器 - 文本 -> Token序列"""
import logging

from config.config import LEXER_CONFIG
from ibex.token_system import (
    Token, TokenKind, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, is_operator
)

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")


def _is_unary_context(tokens):
    """根据前一个Token判断 +/- 是一元还是二元"""
    if not tokens:
        return True
    prev = tokens[-1]
    return prev.kind in (TokenKind.LPAREN, TokenKind.COMMA) or is_operator(prev)


def _scan_digits(text, pos):
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    return pos


def _scan_exponent(text, pos):
    """
    尝试读取指数部分 e[+-]digits，成功返回结束位置，否则返回None（不消费字符）
    """
    if pos >= len(text) or text[pos] not in 'eE':
        return None
    p = pos + 1
    if p < len(text) and text[p] in '+-':
        p += 1
    end = _scan_digits(text, p)
    if end == p:
        return None
    return end


def tokenize(text, scientific_notation=None):
    """
    从左到右扫描文本，不会失败：无法识别的字符产生 UNKNOWN Token，由后续阶段拒绝。

    Args:
        text: 表达式文本
        scientific_notation: 是否识别指数形式字面量，默认取 LEXER_CONFIG
    Returns:
        Token列表
    """
    if scientific_notation is None:
        scientific_notation = LEXER_CONFIG["scientific_notation"]

    tokens = []
    pos = 0
    n = len(text)

    while pos < n:
        ch = text[pos]

        if ch.isspace():
            pos += 1
            continue

        # 数字（整数或小数）
        if ch in DIGITS:
            start = pos
            pos = _scan_digits(text, pos)
            kind = TokenKind.INT
            if pos < n and text[pos] == '.':
                pos = _scan_digits(text, pos + 1)
                kind = TokenKind.FLOAT
            if scientific_notation:
                end = _scan_exponent(text, pos)
                if end is not None:
                    pos = end
                    kind = TokenKind.FLOAT
            tokens.append(Token(kind, text[start:pos]))
            continue

        # 标识符
        if ch.isalpha() or ch == '_':
            start = pos
            while pos < n and (text[pos].isalnum() or text[pos] == '_'):
                pos += 1
            tokens.append(Token(TokenKind.IDENTIFIER, text[start:pos]))
            continue

        if ch in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[ch], ch))

        elif ch in '+-':
            unary = _is_unary_context(tokens)
            if ch == '+':
                kind = TokenKind.UNARY_PLUS if unary else TokenKind.PLUS
            else:
                kind = TokenKind.UNARY_MINUS if unary else TokenKind.MINUS
            tokens.append(Token(kind, ch))

        elif ch in TWO_CHAR_TOKENS:
            second, pair_kind, single_kind = TWO_CHAR_TOKENS[ch]
            if pos + 1 < n and text[pos + 1] == second:
                pos += 1
                tokens.append(Token(pair_kind, ch + second))
            elif single_kind is not None:
                tokens.append(Token(single_kind, ch))
            else:
                tokens.append(Token(TokenKind.UNKNOWN, ch))

        else:
            tokens.append(Token(TokenKind.UNKNOWN, ch))

        pos += 1

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens
