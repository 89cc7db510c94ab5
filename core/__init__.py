"""核心模块 - Token系统、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_SYMBOLS, tokenize, classify
)
from .operators import Operators, BINARY_OPERATORS
from .rpn_evaluator import RPNEvaluator
from .errors import (
    ErrorKind, CalculatorError, InvalidTokenError,
    InsufficientOperandsError, MalformedExpressionError
)
from .interpreter import Interpreter, Outcome, OutcomeType, evaluate

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_SYMBOLS', 'tokenize', 'classify',
    'Operators', 'BINARY_OPERATORS', 'RPNEvaluator',
    'ErrorKind', 'CalculatorError', 'InvalidTokenError',
    'InsufficientOperandsError', 'MalformedExpressionError',
    'Interpreter', 'Outcome', 'OutcomeType', 'evaluate'
]
