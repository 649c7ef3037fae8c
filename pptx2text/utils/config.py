"""
設定ファイル管理ユーティリティ
"""
import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv


CONFIG_ENV_VAR = "PPTX2TEXT_CONFIG"

# 設定ファイルに無いキーはこの値を使う
DEFAULT_CONFIG: Dict[str, Any] = {
    "output": {
        "format": "yaml",
        "yaml": {
            "allow_unicode": True,
            "explicit_start": True,
            "literal_multiline": True,
        },
    },
    "input": {
        "pattern": "*.pptx",
    },
    "logging": {
        "level": "WARNING",
        "format": "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[name]} | {message}",
        "rotation": "10 MB",
        "retention": "30 days",
    },
    "paths": {
        "logs": None,
    },
}


class ConfigManager:
    """設定ファイルの読み込みと管理を行うクラス"""

    def __init__(self, config_path: Optional[str] = None):
        """
        ConfigManagerの初期化

        Args:
            config_path: 設定ファイルのパス（省略時は環境変数、同梱のconfig.yamlの順）
        """
        self.config_path = None
        self.config = {}
        self.reload(config_path)

    def reload(self, config_path: Optional[str] = None):
        """
        設定を読み込み直す

        Args:
            config_path: 設定ファイルのパス
        """
        # 環境変数を読み込み
        load_dotenv()

        explicit = config_path is not None or bool(os.getenv(CONFIG_ENV_VAR))
        if config_path is None:
            config_path = os.getenv(CONFIG_ENV_VAR) or self._default_config_path()

        config_path = Path(config_path)
        self.config = self._load_config(config_path, explicit)
        self.config_path = config_path

    @staticmethod
    def _default_config_path() -> Path:
        # 現在のファイルの場所を基準にconfig.yamlのパスを決定
        return Path(__file__).parent.parent / "config" / "config.yaml"

    def _load_config(self, config_file: Path, explicit: bool) -> Dict[str, Any]:
        """設定ファイルを読み込み、デフォルト設定に上書きする"""
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if config_file.exists():
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}

            if not isinstance(loaded, dict):
                raise ValueError(f"設定ファイルの形式が不正です: {config_file}")

            self._merge(config_data, loaded)
        elif explicit:
            raise FileNotFoundError(f"設定ファイルが見つかりません: {config_file}")

        # 環境変数を置換
        self._replace_env_vars(config_data)
        return config_data

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]):
        """ネストした辞書を再帰的にマージ"""
        for key, value in override.items():
            if isinstance(base.get(key), dict) and isinstance(value, dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _replace_env_vars(self, obj: Any):
        """設定内の環境変数を実際の値に置換"""
        if isinstance(obj, dict):
            for key, value in obj.items():
                if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
                    env_var = value[2:-1]
                    obj[key] = os.getenv(env_var, "")
                elif isinstance(value, (dict, list)):
                    self._replace_env_vars(value)
        elif isinstance(obj, list):
            for i, item in enumerate(obj):
                if isinstance(item, str) and item.startswith("${") and item.endswith("}"):
                    obj[i] = os.getenv(item[2:-1], "")
                else:
                    self._replace_env_vars(item)

    def get(self, key: str, default: Any = None) -> Any:
        """
        設定値を取得

        Args:
            key: 設定キー（ドット区切りでネストしたキーも指定可能）
            default: デフォルト値

        Returns:
            設定値
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_path(self, key: str) -> Optional[Path]:
        """
        パス設定を取得

        Args:
            key: パス設定キー

        Returns:
            Pathオブジェクト（未設定ならNone）
        """
        path_str = self.get(key)
        if path_str:
            return Path(path_str)
        return None


# グローバル設定インスタンス
config = ConfigManager()
