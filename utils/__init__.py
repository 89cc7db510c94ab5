"""工具模块"""
from .formatting import format_number, colorize

__all__ = ['format_number', 'colorize']
