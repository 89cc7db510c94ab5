"""core/token_system.py"""
from collections import namedtuple
from enum import Enum
import logging

import numpy as np

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"      # 数值
    ADD = "add"            # +
    SUBTRACT = "subtract"  # -
    MULTIPLY = "multiply"  # *
    DIVIDE = "divide"      # /
    POWER = "power"        # ^
    MODULUS = "modulus"    # %
    INVALID = "invalid"    # 既不是操作符也不是数值


class Token(namedtuple('Token', ['type', 'value'])):
    """
    不可变Token，按结构比较。
    NUMBER 的 value 为 np.float64，INVALID 的 value 为原始子串，操作符无 value。
    """
    __slots__ = ()

    @property
    def is_operator(self):
        return self.type in OPERATOR_TOKEN_TYPES

    @property
    def symbol(self):
        """操作符符号；数值与非法Token返回原文"""
        if self.is_operator:
            return TOKEN_TO_SYMBOL[self.type]
        return str(self.value)

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Number({float(self.value)!r})"
        if self.type == TokenType.INVALID:
            return f"Invalid({self.value!r})"
        return self.type.name.capitalize()

    def _is_nan_number(self):
        return self.type == TokenType.NUMBER and bool(np.isnan(self.value))

    def __eq__(self, other):
        # 同一文本重新分词必须得到相等序列，nan 与 nan 视为相同
        if isinstance(other, Token) and self._is_nan_number() and other._is_nan_number():
            return True
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        if self._is_nan_number():
            return hash((TokenType.NUMBER, 'nan'))
        return tuple.__hash__(self)


def number_token(value):
    return Token(TokenType.NUMBER, np.float64(value))


def invalid_token(text):
    return Token(TokenType.INVALID, text)


# 操作符定义：符号 -> Token
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.ADD, None),
    '-': Token(TokenType.SUBTRACT, None),
    '*': Token(TokenType.MULTIPLY, None),
    '/': Token(TokenType.DIVIDE, None),
    '^': Token(TokenType.POWER, None),
    '%': Token(TokenType.MODULUS, None),
}

TOKEN_TO_SYMBOL = {token.type: symbol for symbol, token in TOKEN_DEFINITIONS.items()}
OPERATOR_TOKEN_TYPES = frozenset(TOKEN_TO_SYMBOL)
OPERATOR_SYMBOLS = tuple(TOKEN_DEFINITIONS)


def parse_number(text):
    """按 64 位浮点数解析子串，失败返回 None（只接受 ASCII，不接受数字分隔下划线）"""
    if '_' in text or not text.isascii():
        return None
    try:
        return np.float64(float(text))
    except ValueError:
        return None


def classify(text):
    """单个子串分类：先匹配操作符，再尝试浮点数，否则为非法Token"""
    if text in TOKEN_DEFINITIONS:
        return TOKEN_DEFINITIONS[text]

    value = parse_number(text)
    if value is not None:
        return Token(TokenType.NUMBER, value)

    return invalid_token(text)


def tokenize(line):
    """
    将输入行按空白切分并逐个分类
    Args:
        line: 原始输入文本
    Returns:
        Token列表（顺序即求值顺序）；空行或纯空白返回空列表
    """
    tokens = [classify(part) for part in line.split()]
    logger.debug(f"Tokenized {line!r} -> {tokens}")
    return tokens
