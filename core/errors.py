"""core/errors.py - 求值错误分类"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_TOKEN = "invalid_token"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    MALFORMED_EXPRESSION = "malformed_expression"


class CalculatorError(ValueError):
    """所有可恢复求值错误的基类，kind 标识错误类别"""
    kind = None


class InvalidTokenError(CalculatorError):
    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, text, position):
        self.text = text
        self.position = position
        super().__init__(f"invalid token '{text}' at position {position}")


class InsufficientOperandsError(CalculatorError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, symbol, position, stack_size):
        self.symbol = symbol
        self.position = position
        self.stack_size = stack_size
        super().__init__(
            f"insufficient operands for '{symbol}' at position {position} "
            f"(needs 2, stack has {stack_size})"
        )


class MalformedExpressionError(CalculatorError):
    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, stack_size):
        self.stack_size = stack_size
        if stack_size == 0:
            reason = "empty expression"
        else:
            reason = f"{stack_size} values left on the stack, missing operators"
        super().__init__(f"malformed expression: {reason}")
