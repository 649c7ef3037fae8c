"""
YAML変換処理
"""
from dataclasses import fields, is_dataclass
from typing import Any, Dict, List, Optional

import yaml

from ..models import SlideContent
from ...utils.logger import get_logger


def to_camel_case(name: str) -> str:
    """snake_caseをlowerCamelCaseに変換"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class _LiteralDumper(yaml.SafeDumper):
    """改行を含む文字列をリテラルブロックで出力するDumper"""


def _represent_multiline_str(dumper: yaml.SafeDumper, data: str):
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_str(data)


_LiteralDumper.add_representer(str, _represent_multiline_str)


class YamlConverter:
    """抽出結果をYAMLテキストに変換"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = get_logger("YamlConverter")

    @property
    def _dumper(self):
        if self.config.get("literal_multiline", True):
            return _LiteralDumper
        return yaml.SafeDumper

    def to_record(self, obj: Any) -> Dict[str, Any]:
        """データクラスをlowerCamelCaseキーの辞書に変換"""
        if not is_dataclass(obj):
            raise TypeError(f"データクラスではありません: {type(obj).__name__}")

        record = {}
        for f in fields(obj):
            value = getattr(obj, f.name)
            if isinstance(value, tuple):
                value = list(value)
            record[to_camel_case(f.name)] = value
        return record

    def dump(self, data: Any, explicit_start: bool = False) -> str:
        """任意の構造化データをYAMLテキストに変換"""
        return yaml.dump(
            data,
            Dumper=self._dumper,
            allow_unicode=self.config.get("allow_unicode", True),
            default_flow_style=False,
            sort_keys=False,
            explicit_start=explicit_start,
        )

    def serialize_slide(self, content: SlideContent) -> str:
        """1スライド分をYAMLドキュメントに変換"""
        return self.dump(self.to_record(content),
                         explicit_start=self.config.get("explicit_start", True))

    def serialize_slides(self, contents: List[SlideContent]) -> List[str]:
        """スライドごとにYAMLドキュメントを作成"""
        records = [self.serialize_slide(content) for content in contents]
        self.logger.debug(f"YAMLドキュメントを作成: {len(records)}件")
        return records

    def serialize_titles(self, titles: List[str]) -> str:
        """タイトル一覧をYAMLシーケンスに変換"""
        return self.dump(list(titles))
