"""
エラー定義

抽出処理で発生するエラーの種類と、呼び出し側へ報告するエラーレコード。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Pptx2TextError(Exception):
    """pptx2textの基底例外"""


class PathNotFoundError(Pptx2TextError):
    """入力パスが既存のファイルを指していない"""


class PackageError(Pptx2TextError):
    """パッケージ単位の失敗（このファイルの処理は中断する）"""


class PackageOpenError(PackageError):
    """パッケージを開けない、またはPPTX(zip)として読めない"""


class PackageStructureError(PackageError):
    """presentationパートやスライド一覧が存在しない、または不正"""


class UnsupportedOutputFormatError(Pptx2TextError):
    """YAML以外の出力形式が指定された"""


class ErrorCategory(str, Enum):
    """エラーの分類"""
    INVALID_OPERATION = "InvalidOperation"
    NOT_IMPLEMENTED = "NotImplemented"


@dataclass(frozen=True)
class ErrorRecord:
    """報告用のエラーレコード（例外は投げずに結果と一緒に返す）"""
    operation: str
    category: ErrorCategory
    kind: str
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_exception(cls, exc: BaseException, operation: str,
                       category: ErrorCategory = ErrorCategory.INVALID_OPERATION) -> "ErrorRecord":
        """例外からエラーレコードを作成"""
        return cls(
            operation=operation,
            category=category,
            kind=type(exc).__name__,
            message=str(exc),
            exception=exc,
        )

    def __str__(self) -> str:
        return f"[{self.category.value}] {self.operation}: {self.kind}: {self.message}"
