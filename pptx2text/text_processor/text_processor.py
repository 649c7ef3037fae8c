"""
テキスト抽出処理モジュール
"""
from pathlib import Path
from typing import Dict, Any, Optional, Union

from .converters import YamlConverter
from .errors import (
    ErrorCategory,
    ErrorRecord,
    PackageError,
    PathNotFoundError,
    UnsupportedOutputFormatError,
)
from .extractors import SlideTextExtractor
from .models import ExtractionMode, OutputFormat, ProcessResult
from ..utils.config import config
from ..utils.file_handler import FileHandler
from ..utils.logger import get_logger


class TextProcessor:
    """PPTXファイルからテキストを抽出・変換するクラス"""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.logger = get_logger("TextProcessor")
        self.config = self._load_config()

        # コンポーネントを初期化
        self.file_handler = FileHandler(base_dir, pattern=self.config["input_pattern"])
        self.extractor = SlideTextExtractor(self.config)
        self.yaml_converter = YamlConverter(self.config["yaml"])

    def _load_config(self) -> Dict[str, Any]:
        """設定を読み込み"""
        return {
            "output_format": config.get("output.format", "yaml"),
            "input_pattern": config.get("input.pattern", "*.pptx"),
            "yaml": config.get("output.yaml", {}) or {},
        }

    def _report(self, result: ProcessResult, exc: BaseException, operation: str,
                category: ErrorCategory = ErrorCategory.INVALID_OPERATION):
        """エラーを記録してログに出す"""
        record = ErrorRecord.from_exception(exc, operation, category)
        self.logger.error(str(record))
        result.errors.append(record)

    def process_presentation(self, pptx_path: str,
                             mode: ExtractionMode = ExtractionMode.CONTENT,
                             output_format: Optional[Union[OutputFormat, str]] = None) -> ProcessResult:
        """
        1つのPPTXファイルを処理

        エラーは例外にせずProcessResult.errorsに記録する。抽出済みのデータは残す。

        Args:
            pptx_path: PPTXファイルのパス
            mode: 抽出モード（スライド数 / タイトル一覧 / 全テキスト）
            output_format: 出力形式（省略時は設定ファイルの値）

        Returns:
            ProcessResult
        """
        result = ProcessResult(source=str(pptx_path), mode=mode)

        # 入力ファイルの検証
        try:
            path = self.file_handler.resolve_path(pptx_path)
        except PathNotFoundError as e:
            self._report(result, e, "Pptx2Text.validate_path")
            return result
        result.path = str(path)

        self.logger.info(f"Start processing {path}")

        try:
            slide_count = self.extractor.count_slides(str(path))

            if mode is ExtractionMode.SLIDES_COUNT:
                result.data = slide_count
                self.logger.info(f"{slide_count} slides collected.")
            elif mode is ExtractionMode.SLIDE_TITLES:
                titles = self.extractor.list_slide_titles(str(path))
                result.data = titles.value
                result.errors.extend(titles.errors)
            else:
                contents = self.extractor.extract_all(str(path))
                result.data = contents.value
                result.errors.extend(contents.errors)
        except PackageError as e:
            self._report(result, e, "Pptx2Text.process_record")
            return result

        self._serialize(result, output_format)
        return result

    def _serialize(self, result: ProcessResult, output_format: Optional[Union[OutputFormat, str]]):
        """抽出結果を出力形式に変換"""
        try:
            output_format = OutputFormat(output_format or self.config["output_format"])
        except ValueError:
            output_format = None

        if output_format is not OutputFormat.YAML:
            self._report(
                result,
                UnsupportedOutputFormatError("Other formats are not done yet, sorry"),
                "Pptx2Text.serialize",
                ErrorCategory.NOT_IMPLEMENTED,
            )
            return

        if result.mode is ExtractionMode.SLIDES_COUNT:
            result.records = [f"{result.data}\n"]
        elif result.mode is ExtractionMode.SLIDE_TITLES:
            result.records = [self.yaml_converter.serialize_titles(result.data)]
        else:
            result.records = self.yaml_converter.serialize_slides(result.data)
