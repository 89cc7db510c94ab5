"""主程序入口 - 交互模式、单次求值和批处理"""
import argparse
import logging
import sys

from config.config import REPL_CONFIG, BATCH_CONFIG, validate_config
from core.interpreter import Interpreter
from data.expression_loader import load_expressions, save_results
from repl.console import Console
from repl.batch import evaluate_batch, summarize_batch
from utils.formatting import format_number

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run_expression(expression):
    """单次求值，返回进程退出码"""
    outcome = Interpreter().evaluate(expression)
    if outcome.is_result:
        print(format_number(outcome.value))
        return 0
    if outcome.is_failure:
        print(f"{REPL_CONFIG['error_prefix']}{outcome.detail}", file=sys.stderr)
        return 1
    return 0


def run_batch(args):
    try:
        expressions = load_expressions(args.batch_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot load batch input: {e}")
        return 2

    results = evaluate_batch(expressions)
    summary = summarize_batch(results)

    for row in results.itertuples(index=False):
        if row.status == 'ok':
            print(f"{row.expression}{REPL_CONFIG['result_prefix']}{format_number(row.value)}")
        elif row.status == 'error':
            print(f"{row.expression}: {row.detail}")

    if args.save_results:
        save_results(results, args.output_path)

    print(f"{summary['ok']}/{summary['total']} expressions evaluated, {summary['error']} errors")
    return 0 if summary['error'] == 0 else 1


def main(args):
    validate_config()

    if args.expr is not None:
        return run_expression(args.expr)

    if args.batch_path:
        return run_batch(args)

    console = Console(
        prompt=args.prompt,
        use_color=not args.no_color,
        echo_input=not args.no_echo,
        show_banner=not args.no_banner,
        history_file=args.history_file,
    )
    console.run()
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive Reverse Polish Notation calculator")

    parser.add_argument(
        "--expr",
        type=str,
        default=None,
        help="Evaluate a single RPN expression and exit"
    )
    parser.add_argument(
        "--batch_path",
        type=str,
        default=None,
        help="Path to a text file (one expression per line) or a CSV with an 'expression' column"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the batch results to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG['output_path'],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--history_file",
        type=str,
        default=REPL_CONFIG['history_file'],
        help="Persist line history to this file (default: in memory only)"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=REPL_CONFIG['prompt'],
        help="Prompt shown before each line"
    )
    parser.add_argument(
        "--no_color",
        action="store_true",
        help="Disable coloured output"
    )
    parser.add_argument(
        "--no_echo",
        action="store_true",
        help="Do not echo each entered line"
    )
    parser.add_argument(
        "--no_banner",
        action="store_true",
        help="Do not print the startup banner"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
