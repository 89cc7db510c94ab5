"""core/operators.py"""
import numpy as np
import logging

from core.token_system import TokenType

logger = logging.getLogger(__name__)


class Operators:
    """二元操作符的静态方法集合，全部按 IEEE-754 float64 语义计算"""

    @staticmethod
    def _as_float64(operand1, operand2):
        return np.float64(operand1), np.float64(operand2)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符（溢出得到 inf，不裁剪）"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除以0得到 ±inf，0/0 得到 nan，不抛异常"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return np.divide(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        """幂运算：负数的非整数次幂得到 nan"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return np.power(operand1, operand2)

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，结果符号与被除数一致（fmod，而非 Python 的 %）"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return np.fmod(operand1, operand2)


# TokenType -> 二元函数
BINARY_OPERATORS = {
    TokenType.ADD: Operators.add,
    TokenType.SUBTRACT: Operators.sub,
    TokenType.MULTIPLY: Operators.mul,
    TokenType.DIVIDE: Operators.div,
    TokenType.POWER: Operators.pow,
    TokenType.MODULUS: Operators.mod,
}


def get_binary_operator(token_type):
    """查表获取操作符函数，表中缺失的类型视为编程错误"""
    try:
        return BINARY_OPERATORS[token_type]
    except KeyError:
        raise TypeError(f"No binary operator registered for {token_type}") from None
