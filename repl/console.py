"""交互式控制台 - 读取一行、求值、打印结果"""
import logging
import sys

from colorama import Fore
from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import FileHistory, InMemoryHistory

from config.config import REPL_CONFIG
from core.interpreter import Interpreter
from core.token_system import OPERATOR_SYMBOLS
from utils.formatting import format_number, colorize

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

BANNER = """RPN calculator {version}
Operators: {operators}
Enter numbers and operators separated by spaces, e.g. 3 4 +
Type quit or exit (or press Ctrl-D) to leave."""


def build_banner():
    return BANNER.format(version=VERSION, operators=" ".join(OPERATOR_SYMBOLS))


def create_prompt_session(history_file=None):
    """创建带历史记录的 prompt_toolkit 会话"""
    if history_file:
        history = FileHistory(str(history_file))
    else:
        history = InMemoryHistory()
    return PromptSession(history=history)


class Console:

    def __init__(self, interpreter=None, reader=None, output=None, prompt=None,
                 use_color=None, echo_input=None, show_banner=None, history_file=None):
        """
        Args:
            interpreter: Interpreter实例，默认使用配置中的退出命令
            reader: 读取一行的可调用对象 reader(prompt)；默认使用 prompt_toolkit 会话
            output: 输出流，默认 sys.stdout
        """
        self.interpreter = interpreter or Interpreter()
        self.output = output or sys.stdout
        self.prompt = REPL_CONFIG['prompt'] if prompt is None else prompt
        self.use_color = REPL_CONFIG['use_color'] if use_color is None else use_color
        self.echo_input = REPL_CONFIG['echo_input'] if echo_input is None else echo_input
        self.show_banner = REPL_CONFIG['show_banner'] if show_banner is None else show_banner
        self.history_file = REPL_CONFIG['history_file'] if history_file is None else history_file
        self._reader = reader

        self.lines_evaluated = 0
        self.failures = 0

    def _write(self, text):
        print(text, file=self.output)

    def _read_line(self):
        prompt = colorize(self.prompt, Fore.RED, self.use_color)
        if self._reader is None:
            session = create_prompt_session(self.history_file)
            self._reader = lambda message: session.prompt(ANSI(message))
        return self._reader(prompt)

    def handle_line(self, line):
        """
        处理一行输入并打印结果
        Returns:
            True 表示应结束会话
        """
        if self.echo_input:
            self._write(colorize(f"{REPL_CONFIG['echo_prefix']}{line}", Fore.YELLOW, self.use_color))

        outcome = self.interpreter.evaluate(line)
        if outcome.is_terminate:
            return True

        self.lines_evaluated += 1
        if outcome.is_result:
            self._write(f"{REPL_CONFIG['result_prefix']}{format_number(outcome.value)}")
        else:
            self.failures += 1
            self._write(f"{REPL_CONFIG['error_prefix']}{outcome.detail}")
        return False

    def run(self):
        """读取-求值-打印循环，直到退出命令、EOF 或 Ctrl-C"""
        if self.show_banner:
            self._write(build_banner())

        logger.info("Session started")
        try:
            while True:
                line = self._read_line()
                if self.handle_line(line):
                    break
        except EOFError:
            logger.debug("EOF received")
        except KeyboardInterrupt:
            logger.debug("Interrupted")

        logger.info(f"Session finished: {self.lines_evaluated} lines evaluated, {self.failures} failed")
        return self.lines_evaluated, self.failures
