"""ConfigManagerのテスト"""
import pytest

from pptx2text.utils.config import ConfigManager


class TestConfigManager:

    def test_bundled_config(self):
        manager = ConfigManager()
        assert manager.config_path.name == "config.yaml"
        assert manager.get("output.format") == "yaml"
        assert manager.get("input.pattern") == "*.pptx"
        assert manager.get_path("paths.logs") is None

    def test_file_values_override_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("output:\n  yaml:\n    explicit_start: false\n", encoding="utf-8")

        manager = ConfigManager(str(config_file))
        assert manager.get("output.yaml.explicit_start") is False
        # 指定していないキーはデフォルトのまま
        assert manager.get("output.yaml.allow_unicode") is True
        assert manager.get("output.format") == "yaml"

    def test_env_var_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PPTX2TEXT_TEST_LOGS", str(tmp_path / "logs"))
        config_file = tmp_path / "config.yaml"
        config_file.write_text("paths:\n  logs: ${PPTX2TEXT_TEST_LOGS}\n", encoding="utf-8")

        manager = ConfigManager(str(config_file))
        assert manager.get_path("paths.logs") == tmp_path / "logs"

    def test_config_path_from_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("input:\n  pattern: '*.PPTX'\n", encoding="utf-8")
        monkeypatch.setenv("PPTX2TEXT_CONFIG", str(config_file))

        manager = ConfigManager()
        assert manager.config_path == config_file
        assert manager.get("input.pattern") == "*.PPTX"

    def test_missing_explicit_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(tmp_path / "missing.yaml"))

    def test_get_default_for_unknown_key(self):
        manager = ConfigManager()
        assert manager.get("no.such.key", 42) == 42
