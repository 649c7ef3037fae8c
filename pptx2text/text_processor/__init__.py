"""
テキスト抽出処理モジュール
"""
