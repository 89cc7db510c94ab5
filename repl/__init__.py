"""交互与批处理模块"""
from .console import Console, build_banner
from .batch import evaluate_batch, summarize_batch

__all__ = ['Console', 'build_banner', 'evaluate_batch', 'summarize_batch']
