"""Tests for the YAML configuration manager"""
import pytest

from resthub.config import ConfigManager


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "model:\n"
        "  path: models/custom\n"
        "  hyperparameters:\n"
        "    n_estimators: 10\n"
        "display:\n"
        "  time_format: '%I:%M %p'\n"
    )
    return str(path)


class TestConfigManager:
    """Test configuration lookups"""

    def test_dotted_keys(self, config_file):
        config = ConfigManager(config_file)
        assert config.get('model.path') == 'models/custom'
        assert config.get('model.hyperparameters.n_estimators') == 10
        assert config.get('display.time_format') == '%I:%M %p'

    def test_missing_key_default(self, config_file):
        config = ConfigManager(config_file)
        assert config.get('model.unknown', 'fallback') == 'fallback'
        assert config.get('model.path.deeper') is None

    def test_missing_file_is_empty(self, tmp_path):
        config = ConfigManager(str(tmp_path / "absent.yaml"))
        assert config.config == {}
        assert config.get('model.path', 'models/sleep_calculator') == 'models/sleep_calculator'

    def test_env_override(self, config_file, monkeypatch):
        monkeypatch.setenv('RESTHUB_CONFIG', config_file)
        assert ConfigManager().get('model.path') == 'models/custom'
