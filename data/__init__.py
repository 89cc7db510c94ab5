"""数据模块 - 表达式加载和结果保存"""
from .expression_loader import load_expressions, save_results

__all__ = ['load_expressions', 'save_results']
