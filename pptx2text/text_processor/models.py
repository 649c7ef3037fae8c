"""
データモデル
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from .errors import ErrorRecord

T = TypeVar("T")


class OutputFormat(str, Enum):
    """出力形式"""
    YAML = "yaml"
    XML = "xml"


class ExtractionMode(str, Enum):
    """抽出モード"""
    CONTENT = "content"
    SLIDES_COUNT = "slides_count"
    SLIDE_TITLES = "slide_titles"


@dataclass(frozen=True)
class SlideContent:
    """1スライド分のテキスト（タイトルとトピック）"""
    title: str = ""
    topics: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "topics": list(self.topics)}


@dataclass
class ExtractionResult(Generic[T]):
    """抽出結果。途中で失敗したスライドのエラーも保持する"""
    value: T
    errors: List[ErrorRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class ProcessResult:
    """1ファイル分の処理結果"""
    source: str
    mode: ExtractionMode
    path: Optional[str] = None
    data: Any = None
    records: List[str] = field(default_factory=list)
    errors: List[ErrorRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
