"""
スライドテキスト抽出モジュール
"""

from .base import BaseSlideExtractor
from .pptx_text import SlideTextExtractor

__all__ = [
    'BaseSlideExtractor',
    'SlideTextExtractor'
]
