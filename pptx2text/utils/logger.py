"""
ログ管理ユーティリティ

標準出力は抽出結果（YAML）に使うため、ログは標準エラーと任意のログファイルに出す。
"""
import sys
from loguru import logger
from typing import Optional

from .config import config

DEFAULT_NAME = "pptx2text"
DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[name]} | {message}"


class LoggerManager:
    """ログ管理クラス"""

    def __init__(self):
        self.level = None
        self.setup_logger()

    @staticmethod
    def level_for(verbose: bool = False, debug: bool = False) -> Optional[str]:
        """
        コマンドラインのフラグからログレベルを決める

        Returns:
            "DEBUG" / "INFO"、どちらも指定なしならNone（設定ファイルの値を使う）
        """
        if debug:
            return "DEBUG"
        if verbose:
            return "INFO"
        return None

    def setup_logger(self, level: Optional[str] = None):
        """
        ログ設定をセットアップ

        Args:
            level: ログレベル（省略時は設定ファイルの logging.level）
        """
        logger.remove()

        self.level = (level or config.get("logging.level", "WARNING")).upper()
        log_format = config.get("logging.format", DEFAULT_FORMAT)

        logger.add(sys.stderr, format=log_format, level=self.level, colorize=False)

        log_path = config.get_path("paths.logs")
        if log_path:
            log_path.mkdir(parents=True, exist_ok=True)
            logger.add(
                log_path / f"{DEFAULT_NAME}.log",
                format=log_format,
                level=self.level,
                rotation=config.get("logging.rotation", "10 MB"),
                retention=config.get("logging.retention", "30 days"),
                encoding="utf-8"
            )

    def configure(self, verbose: bool = False, debug: bool = False):
        """-v / --debug に合わせてログを設定し直す"""
        self.setup_logger(self.level_for(verbose, debug))


# グローバルロガーインスタンス
log_manager = LoggerManager()


def get_logger(name: str = None):
    """名前をextraに付けたloguruのロガーを返す"""
    return logger.bind(name=name or DEFAULT_NAME)
