"""解释器 - 退出检测、分词与求值的编排，对外只返回 Outcome"""
from enum import Enum
import logging
import math

from config.config import EVAL_CONFIG
from core.token_system import tokenize
from core.rpn_evaluator import RPNEvaluator
from core.errors import CalculatorError

logger = logging.getLogger(__name__)


class OutcomeType(Enum):
    TERMINATE = "terminate"
    RESULT = "result"
    FAILURE = "failure"


class Outcome:
    """一行输入的求值结果：Terminate / Result(value) / Failure(kind, detail)"""

    def __init__(self, outcome_type, value=None, kind=None, detail=None):
        self.type = outcome_type
        self.value = value
        self.kind = kind
        self.detail = detail

    @classmethod
    def terminate(cls):
        return cls(OutcomeType.TERMINATE)

    @classmethod
    def result(cls, value):
        return cls(OutcomeType.RESULT, value=float(value))

    @classmethod
    def failure(cls, kind, detail):
        return cls(OutcomeType.FAILURE, kind=kind, detail=detail)

    @property
    def is_terminate(self):
        return self.type == OutcomeType.TERMINATE

    @property
    def is_result(self):
        return self.type == OutcomeType.RESULT

    @property
    def is_failure(self):
        return self.type == OutcomeType.FAILURE

    def __eq__(self, other):
        if not isinstance(other, Outcome):
            return NotImplemented
        if self.type != other.type or self.kind != other.kind:
            return False
        if self.is_result:
            # nan 与 nan 视为相同结果
            both_nan = math.isnan(self.value) and math.isnan(other.value)
            return both_nan or self.value == other.value
        return True

    def __hash__(self):
        return hash((self.type, self.kind))

    def __repr__(self):
        if self.is_result:
            return f"Result({self.value!r})"
        if self.is_failure:
            return f"Failure({self.kind.name}, {self.detail!r})"
        return "Terminate"


class Interpreter:

    def __init__(self, quit_commands=None):
        if quit_commands is None:
            quit_commands = EVAL_CONFIG['quit_commands']
        self.quit_commands = frozenset(quit_commands)
        self.evaluator = RPNEvaluator

    def is_quit(self, line):
        """原始行与退出命令完全相等（不去空白，区分大小写）"""
        return line in self.quit_commands

    def evaluate(self, line):
        """
        Args:
            line: 用户输入的一行原始文本
        Returns:
            Outcome
        """
        if self.is_quit(line):
            logger.debug(f"Quit command received: {line!r}")
            return Outcome.terminate()

        tokens = tokenize(line)
        try:
            value = self.evaluator.evaluate(tokens)
        except CalculatorError as e:
            logger.debug(f"Evaluation failed ({e.kind.name}): {e}")
            return Outcome.failure(e.kind, str(e))

        return Outcome.result(value)


_default_interpreter = Interpreter()


def evaluate(line):
    """使用默认退出命令求值一行输入"""
    return _default_interpreter.evaluate(line)
