"""批处理求值 - 对一组表达式逐个求值并汇总为 DataFrame"""
import numpy as np
import pandas as pd
import logging

from core.interpreter import Interpreter

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'status', 'value', 'error_kind', 'detail']


def evaluate_batch(expressions, interpreter=None):
    """
    Args:
        expressions: 表达式字符串序列
        interpreter: Interpreter实例，默认新建
    Returns:
        DataFrame，列为 RESULT_COLUMNS；遇到退出命令时记录为 quit 并停止
    """
    interpreter = interpreter or Interpreter()
    rows = []

    for expression in expressions:
        outcome = interpreter.evaluate(expression)

        if outcome.is_terminate:
            rows.append({'expression': expression, 'status': 'quit', 'value': np.nan,
                         'error_kind': '', 'detail': ''})
            logger.info(f"Quit command reached, {len(rows) - 1} expressions evaluated")
            break

        if outcome.is_result:
            rows.append({'expression': expression, 'status': 'ok', 'value': outcome.value,
                         'error_kind': '', 'detail': ''})
        else:
            logger.warning(f"Failed to evaluate '{expression}': {outcome.detail}")
            rows.append({'expression': expression, 'status': 'error', 'value': np.nan,
                         'error_kind': outcome.kind.name, 'detail': outcome.detail})

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    results['value'] = results['value'].astype(float)
    return results


def summarize_batch(results):
    """统计批处理结果"""
    # 退出命令所在行不计入总数
    summary = {
        'total': int((results['status'] != 'quit').sum()),
        'ok': int((results['status'] == 'ok').sum()),
        'error': int((results['status'] == 'error').sum()),
    }
    logger.info(f"Batch summary: {summary['ok']}/{summary['total']} ok, {summary['error']} errors")
    return summary
