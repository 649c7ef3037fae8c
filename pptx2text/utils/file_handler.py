"""
ファイル操作ユーティリティ
"""
import glob
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .logger import get_logger
from ..text_processor.errors import PathNotFoundError


class FileHandler:
    """入力パスの検証と出力ファイルの書き込みを管理"""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None, pattern: str = "*.pptx"):
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.pattern = pattern
        self.logger = get_logger("FileHandler")

    def resolve_path(self, raw_path: Union[str, Path]) -> Path:
        """
        入力パスを絶対パスに解決して存在を確認

        Args:
            raw_path: 入力されたパス（相対パスはbase_dir基準、~も展開）

        Returns:
            存在するファイルの絶対パス

        Raises:
            PathNotFoundError: ファイルが存在しない
        """
        path = Path(raw_path).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        path = path.resolve()
        self.logger.debug(f"*** {path}")

        if not path.is_file():
            raise PathNotFoundError(f"{path} が存在しません")
        return path

    def expand_inputs(self, raw_inputs: Iterable[str]) -> List[str]:
        """
        入力の一覧を展開する

        ディレクトリはpatternに一致するファイル、ワイルドカードは一致するファイルに展開する。
        どれにも当てはまらない入力はそのまま残し、後の検証でエラーとして報告させる。
        """
        expanded = []
        for raw in raw_inputs:
            path = Path(raw).expanduser()
            if not path.is_absolute():
                path = self.base_dir / path

            if path.is_file():
                expanded.append(str(raw))
            elif path.is_dir():
                files = sorted(str(p) for p in path.glob(self.pattern) if p.is_file())
                if not files:
                    self.logger.warning(f"指定されたディレクトリに{self.pattern}が見つかりません: {path}")
                expanded.extend(files)
            elif any(c in str(raw) for c in "*?["):
                matching_files = sorted(glob.glob(str(path)))
                if not matching_files:
                    self.logger.warning(f"指定されたパターンにマッチするファイルが見つかりません: {raw}")
                expanded.extend(matching_files)
            else:
                expanded.append(str(raw))

        self.logger.info(f"入力ファイル: {len(expanded)}件")
        return expanded

    def write_text(self, text: str, output_path: Union[str, Path]) -> Path:
        """テキストファイルとして保存"""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text)

        self.logger.info(f"出力ファイルを保存: {output_path}")
        return output_path
