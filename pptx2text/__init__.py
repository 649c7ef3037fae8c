"""
PPTXファイルからスライドのタイトルと本文テキストを抽出してYAMLで出力するツール
"""

__version__ = "0.1.0"
