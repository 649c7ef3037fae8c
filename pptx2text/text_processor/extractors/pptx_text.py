"""
python-pptxを使用したスライドテキスト抽出
"""
import zipfile
from contextlib import contextmanager
from typing import Iterator, List

from lxml import etree
from pptx import Presentation
from pptx.enum.shapes import PP_PLACEHOLDER
from pptx.exc import PackageNotFoundError
from pptx.oxml.ns import qn
from pptx.shapes.group import GroupShape

from .base import BaseSlideExtractor
from ..errors import ErrorRecord, PackageOpenError, PackageStructureError
from ..models import ExtractionResult, SlideContent

TITLE_PLACEHOLDER_TYPES = (PP_PLACEHOLDER.TITLE, PP_PLACEHOLDER.CENTER_TITLE)


@contextmanager
def open_presentation(pptx_path: str):
    """
    PPTXを読み取り専用で開く

    例外はPackageOpenError / PackageStructureErrorに変換する。
    ファイルハンドルはどの経路でも閉じる。
    """
    try:
        stream = open(pptx_path, "rb")
    except OSError as e:
        raise PackageOpenError(f"ファイルを開けません: {pptx_path} ({e})") from e

    with stream:
        try:
            prs = Presentation(stream)
        except (PackageNotFoundError, zipfile.BadZipFile, etree.XMLSyntaxError) as e:
            raise PackageOpenError(f"PPTXパッケージとして読み込めません: {pptx_path} ({e})") from e
        except (KeyError, ValueError) as e:
            raise PackageStructureError(f"presentationパートが不正です: {pptx_path} ({e})") from e

        yield prs


def is_title_shape(shape) -> bool:
    """プレースホルダーの種類がTitle / CenteredTitleならタイトル図形"""
    if not shape.is_placeholder:
        return False
    return shape.placeholder_format.type in TITLE_PLACEHOLDER_TYPES


def iter_text_shapes(shapes) -> Iterator:
    """テキストを持つ図形を文書順に返す（グループ内も再帰的にたどる）"""
    for shape in shapes:
        if isinstance(shape, GroupShape):
            yield from iter_text_shapes(shape.shapes)
        elif shape.has_text_frame:
            yield shape


def get_paragraph_text(paragraph) -> str:
    """段落内のa:tを文書順に連結（a:rだけでなくa:fldのスライド番号や日付も含む）"""
    return "".join(t.text or "" for t in paragraph._p.iter(qn("a:t")))


def get_shape_text(shape) -> str:
    """図形のテキスト（各段落の後ろに改行を付ける）"""
    return "".join(get_paragraph_text(p) + "\n" for p in shape.text_frame.paragraphs)


def get_slide_title(slide) -> str:
    """
    スライドのタイトルを取得

    タイトル図形が複数ある場合は全段落を改行でつなぐ。
    """
    paragraphs = []
    for shape in iter_text_shapes(slide.shapes):
        if is_title_shape(shape):
            paragraphs.extend(get_paragraph_text(p) for p in shape.text_frame.paragraphs)
    return "\n".join(paragraphs)


class SlideTextExtractor(BaseSlideExtractor):
    """python-pptxを使用したスライドテキスト抽出"""

    def count_slides(self, pptx_path: str) -> int:
        """
        スライド数を取得

        Args:
            pptx_path: PPTXファイルのパス

        Returns:
            スライド数

        Raises:
            PackageOpenError: パッケージを開けない
            PackageStructureError: presentationパートが不正
        """
        with open_presentation(pptx_path) as prs:
            try:
                slide_count = len(prs.slides)
            except (KeyError, AttributeError) as e:
                raise PackageStructureError(f"スライド一覧を読み込めません: {pptx_path} ({e})") from e

        self.logger.debug(f"スライド数: {slide_count} ({pptx_path})")
        return slide_count

    def list_slide_titles(self, pptx_path: str) -> ExtractionResult[List[str]]:
        """
        全スライドのタイトルをスライド順に取得

        読み込みに失敗したスライドは空文字にして次のスライドへ進む。

        Args:
            pptx_path: PPTXファイルのパス

        Returns:
            タイトルのリスト（スライド数と同じ長さ）
        """
        result: ExtractionResult[List[str]] = ExtractionResult(value=[])

        with open_presentation(pptx_path) as prs:
            slides = prs.slides
            for index in range(len(slides)):
                try:
                    title = get_slide_title(slides[index])
                except Exception as e:
                    self.logger.error(f"スライド {index + 1} のタイトル取得でエラー: {e}")
                    result.errors.append(ErrorRecord.from_exception(
                        e, "SlideTextExtractor.get_slide_title"))
                    title = ""

                # 空のタイトルもそのまま追加
                result.value.append(title)

        self.logger.info(f"{len(result.value)} slide titles collected.")
        return result

    def extract_slide(self, pptx_path: str, index: int) -> ExtractionResult[SlideContent]:
        """
        0始まりのindexで指定したスライドのテキストを抽出

        タイトル図形が複数ある場合は最後のものがタイトルになる。
        途中で失敗した場合はそこまでの内容を返す。

        Args:
            pptx_path: PPTXファイルのパス
            index: スライド番号（0始まり）

        Returns:
            SlideContent
        """
        title = ""
        topics = []
        errors = []

        with open_presentation(pptx_path) as prs:
            try:
                if not 0 <= index < len(prs.slides):
                    raise IndexError(f"スライド番号が範囲外です: {index} (スライド数 {len(prs.slides)})")
                slide = prs.slides[index]
                for shape in iter_text_shapes(slide.shapes):
                    if is_title_shape(shape):
                        title = "".join(get_paragraph_text(p) for p in shape.text_frame.paragraphs)
                    else:
                        topics.append(get_shape_text(shape))
            except Exception as e:
                self.logger.error(f"スライド {index + 1} のテキスト抽出でエラー: {e}")
                errors.append(ErrorRecord.from_exception(e, "SlideTextExtractor.get_slide_content"))

        self.logger.debug(f"スライド {index + 1}: {len(topics)}個のトピックを抽出")
        return ExtractionResult(value=SlideContent(title=title, topics=tuple(topics)), errors=errors)
