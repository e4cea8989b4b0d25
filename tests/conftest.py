import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ibex import Token, TokenKind  # noqa: E402


@pytest.fixture
def num():
    """Token工厂：num('1') -> INT, num('1.5') -> FLOAT"""
    def make(text):
        kind = TokenKind.FLOAT if ('.' in text or 'e' in text.lower()) else TokenKind.INT
        return Token(kind, text)
    return make


@pytest.fixture
def op():
    """按文本构造操作符Token，一元操作符用 'u+' / 'u-' 表示"""
    def make(symbol):
        kind = TokenKind(symbol)
        text = symbol[1:] if symbol in ('u+', 'u-') else symbol
        return Token(kind, text)
    return make
