"""
スライドテキスト抽出の基底クラス
"""
from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional

from ..errors import ErrorRecord, PackageError
from ..models import ExtractionResult, SlideContent
from ...utils.logger import get_logger


class BaseSlideExtractor(ABC):
    """スライドテキスト抽出の基底クラス"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def count_slides(self, pptx_path: str) -> int:
        """スライド数を取得"""
        pass

    @abstractmethod
    def list_slide_titles(self, pptx_path: str) -> ExtractionResult[List[str]]:
        """全スライドのタイトルをスライド順に取得"""
        pass

    @abstractmethod
    def extract_slide(self, pptx_path: str, index: int) -> ExtractionResult[SlideContent]:
        """0始まりのindexで指定したスライドのテキストを抽出"""
        pass

    def extract_all(self, pptx_path: str) -> ExtractionResult[List[SlideContent]]:
        """
        すべてのスライドのテキストを抽出
        デフォルト実装：スライド数を数えて1枚ずつextract_slideを呼ぶ
        """
        slide_count = self.count_slides(pptx_path)
        result: ExtractionResult[List[SlideContent]] = ExtractionResult(value=[])

        for index in range(slide_count):
            try:
                slide_result = self.extract_slide(pptx_path, index)
            except PackageError as e:
                # 抽出済みのスライドは残す
                self.logger.error(f"スライド {index + 1} の読み込み中にパッケージを開けませんでした: {e}")
                result.errors.append(ErrorRecord.from_exception(
                    e, f"{self.__class__.__name__}.extract_all"))
                break

            result.value.append(slide_result.value)
            result.errors.extend(slide_result.errors)

        self.logger.info(f"{len(result.value)} slides collected.")
        return result
