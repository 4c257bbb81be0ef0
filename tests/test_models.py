import os
import pytest
from unittest.mock import patch
from dev_tools.core.models import Config, RunResult


class TestConfig:
    def test_default_config(self):
        config = Config()
        assert config.autorest_path is None
        assert config.theme == "manhattan"
        assert config.log_level == "WARNING"

    def test_config_from_environment(self):
        with patch.dict(os.environ, {
            "AUTOREST_PATH": "./node_modules/.bin",
            "DEV_TOOLS_THEME": "green",
            "DEV_TOOLS_LOG_LEVEL": "DEBUG",
        }):
            config = Config()
        assert config.autorest_path == "./node_modules/.bin"
        assert config.theme == "green"
        assert config.log_level == "DEBUG"

    def test_empty_autorest_path_is_unset(self):
        with patch.dict(os.environ, {"AUTOREST_PATH": ""}):
            assert Config().autorest_path is None

    def test_custom_config(self):
        config = Config(autorest_path="bin", theme="green")
        assert config.autorest_path == "bin"
        assert config.theme == "green"


class TestRunResult:
    def test_defaults(self):
        result = RunResult(exit_code=0)
        assert result.stdout == ""
        assert result.stderr == ""
        assert result.process_id is None
        assert result.succeeded() is True

    def test_failure(self):
        assert RunResult(exit_code=1).succeeded() is False
