"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TokenType
from core.operators import get_binary_operator
from core.errors import (
    InvalidTokenError, InsufficientOperandsError, MalformedExpressionError
)

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        单遍从左到右评估RPN表达式，遇到第一个错误立即中止
        Args:
            token_sequence: Token序列
        Returns:
            栈中剩余的唯一数值（float）
        Raises:
            InvalidTokenError: 出现非法Token
            InsufficientOperandsError: 二元操作符遇到的栈元素少于2个
            MalformedExpressionError: 结束后栈中不是恰好1个元素
        """
        stack = []

        for position, token in enumerate(token_sequence):
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.INVALID:
                logger.debug(f"Invalid token {token.value!r} at position {position}")
                raise InvalidTokenError(token.value, position)

            else:
                # ================== 二元操作符处理 ==================
                op_method = get_binary_operator(token.type)
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.symbol}: stack={len(stack)}")
                    raise InsufficientOperandsError(token.symbol, position, len(stack))

                # 先弹出的是右操作数
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(op_method(operand1, operand2))

            logger.debug(f"After {token!r}: stack depth {len(stack)}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpressionError(len(stack))

        return float(stack[0])
