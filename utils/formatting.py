"""utils/formatting.py"""
import numpy as np
from colorama import Style

# 超过该量级的整数值不再按整数打印
MAX_INTEGRAL_DISPLAY = 1e16


def format_number(value):
    """格式化结果：整数值不带小数部分，inf/-inf/NaN 使用固定写法"""
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < MAX_INTEGRAL_DISPLAY:
        # -0.0 也打印为 0
        return str(int(value))
    return repr(value)


def colorize(text, color, enabled=True):
    """给文本加上 ANSI 颜色；enabled 为 False 时原样返回"""
    if not enabled or not color:
        return text
    return f"{color}{Style.BRIGHT}{text}{Style.RESET_ALL}"
