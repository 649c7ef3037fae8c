"""テスト用のPPTXをpython-pptxで作成するフィクスチャ"""
from copy import deepcopy

import pytest
from lxml import etree
from pptx import Presentation
from pptx.oxml.ns import qn
from pptx.util import Inches

from pptx2text.utils.logger import log_manager

TITLE_SLIDE = 0
TITLE_AND_CONTENT = 1
TITLE_ONLY = 5
BLANK = 6


def add_textbox(shapes, text):
    box = shapes.add_textbox(Inches(1), Inches(2), Inches(4), Inches(1))
    box.text_frame.text = text
    return box


def add_extra_title(slide, text):
    """タイトルプレースホルダーを複製して2つ目のタイトル図形を追加"""
    title_elm = deepcopy(slide.shapes.title._element)
    slide.shapes._spTree.insert_element_before(title_elm, "p:extLst")
    shape = slide.shapes[-1]
    shape.text_frame.text = text
    return shape


def build_scenario(path):
    """
    3枚のスライド
      1: タイトル "Intro" と本文 "Hello" / "World"
      2: 図形なし
      3: タイトル図形が2つ "Agenda" と "Overview"
    """
    prs = Presentation()

    slide = prs.slides.add_slide(prs.slide_layouts[TITLE_ONLY])
    slide.shapes.title.text = "Intro"
    add_textbox(slide.shapes, "Hello\nWorld")

    prs.slides.add_slide(prs.slide_layouts[BLANK])

    slide = prs.slides.add_slide(prs.slide_layouts[TITLE_ONLY])
    slide.shapes.title.text = "Agenda"
    add_extra_title(slide, "Overview")

    prs.save(str(path))
    return path


@pytest.fixture
def scenario_pptx(tmp_path):
    return build_scenario(tmp_path / "scenario.pptx")


@pytest.fixture
def empty_pptx(tmp_path):
    path = tmp_path / "empty.pptx"
    Presentation().save(str(path))
    return path


@pytest.fixture
def corrupt_pptx(tmp_path):
    path = tmp_path / "corrupt.pptx"
    path.write_bytes(b"this is not a zip package")
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    """capsysで差し替えられたstderrをloguruが掴んだままにしない"""
    yield
    log_manager.setup_logger()


def add_field(paragraph, text, field_type="slidenum"):
    """段落の末尾にa:fld（スライド番号などのフィールド）を追加"""
    fld = etree.SubElement(paragraph._p, qn("a:fld"),
                           {"id": "{B6F15528-21DE-4FAA-801E-634DDDAF4B2B}", "type": field_type})
    etree.SubElement(fld, qn("a:rPr"), {"lang": "en-US"})
    etree.SubElement(fld, qn("a:t")).text = text
    # a:endParaRPrは段落の最後に置く
    end = paragraph._p.find(qn("a:endParaRPr"))
    if end is not None:
        paragraph._p.remove(end)
        paragraph._p.append(end)
    return fld
