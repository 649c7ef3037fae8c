"""
変換処理モジュール
"""

from .yaml_converter import YamlConverter

__all__ = [
    'YamlConverter'
]
