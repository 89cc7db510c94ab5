"""表达式加载和结果保存模块"""
import pandas as pd
import logging
from pathlib import Path

from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    加载批处理表达式。

    Parameters:
    - file_path: CSV 文件（需包含表达式列）或每行一个表达式的文本文件
    - expression_column: CSV 中的表达式列名, 默认取 BATCH_CONFIG

    Returns:
    - expressions: 表达式字符串列表
    """
    expression_column = expression_column or BATCH_CONFIG['expression_column']
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Expression file not found: {file_path}")

    logger.info(f"Loading expressions from {file_path}")

    if path.suffix.lower() == '.csv':
        # dtype=str 防止 pandas 把 "3" 之类的单元格转成数值
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if expression_column not in df.columns:
            raise ValueError(f"Column '{expression_column}' not found in {file_path}.")
        expressions = df[expression_column].tolist()
    else:
        with open(path, 'r', encoding='utf-8') as f:
            expressions = [line.rstrip('\r\n') for line in f]

    # 跳过空行
    expressions = [expr for expr in expressions if expr.strip()]
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_results(results, output_path=None):
    """保存批处理结果为CSV（不含索引）"""
    output_path = output_path or BATCH_CONFIG['output_path']
    logger.info(f"Saving {len(results)} results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path
