"""YamlConverterのテスト"""
from dataclasses import dataclass

import pytest
import yaml

from pptx2text.text_processor.converters import YamlConverter
from pptx2text.text_processor.converters.yaml_converter import to_camel_case
from pptx2text.text_processor.models import SlideContent


@dataclass
class _SpeakerNote:
    slide_number: int
    note_text: str


class TestYamlConverter:

    def setup_method(self):
        self.converter = YamlConverter({"explicit_start": True, "literal_multiline": True})

    def test_slide_document_layout(self):
        text = self.converter.serialize_slide(SlideContent("Intro", ("Hello\nWorld\n",)))

        assert text.startswith("---\n")
        assert text.index("title:") < text.index("topics:")
        assert "|" in text
        assert yaml.safe_load(text) == {"title": "Intro", "topics": ["Hello\nWorld\n"]}

    def test_empty_topics_is_empty_sequence(self):
        text = self.converter.serialize_slide(SlideContent())
        assert yaml.safe_load(text) == {"title": "", "topics": []}
        assert "topics: []" in text

    def test_one_document_per_slide(self):
        records = self.converter.serialize_slides([SlideContent("a"), SlideContent("b")])
        assert len(records) == 2
        assert [d["title"] for d in yaml.safe_load_all("".join(records))] == ["a", "b"]

    def test_unicode_is_kept(self):
        text = self.converter.serialize_slide(SlideContent("はじめに", ("概要\n",)))
        assert "はじめに" in text

    def test_titles_sequence(self):
        text = self.converter.serialize_titles(["Intro", "", "Agenda\nOverview"])
        assert yaml.safe_load(text) == ["Intro", "", "Agenda\nOverview"]

    def test_without_explicit_start_and_literal_blocks(self):
        converter = YamlConverter({"explicit_start": False, "literal_multiline": False})
        text = converter.serialize_slide(SlideContent("t", ("a\nb\n",)))
        assert not text.startswith("---")
        assert "|" not in text
        assert yaml.safe_load(text)["topics"] == ["a\nb\n"]

    def test_field_names_are_lower_camel_case(self):
        record = self.converter.to_record(_SpeakerNote(slide_number=1, note_text="hi"))
        assert list(record) == ["slideNumber", "noteText"]

    def test_to_record_rejects_plain_objects(self):
        with pytest.raises(TypeError):
            self.converter.to_record({"title": "x"})


@pytest.mark.parametrize("name, expected", [
    ("title", "title"),
    ("slide_titles", "slideTitles"),
    ("output_format_name", "outputFormatName"),
])
def test_to_camel_case(name, expected):
    assert to_camel_case(name) == expected
