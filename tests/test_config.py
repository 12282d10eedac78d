"""Tests for settings, rule files and logging setup."""

import json
import logging
from pathlib import Path

import pytest

from termedit.config import Settings, config_dir, load_rules, read_rules, rule_file_for
from termedit.errors import RuleFileError
from termedit.log import LOG_FORMAT, setup_logging


class TestConfigDir:
    """Config directory resolution."""

    def test_env_override(self, isolated_config: Path) -> None:
        assert config_dir() == isolated_config

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TERMEDIT_CONFIG_DIR")
        assert config_dir() == Path.home() / ".config" / "termedit"


class TestSettings:
    """settings.json loading."""

    def test_defaults_without_file(self, isolated_config: Path) -> None:
        settings = Settings.load()
        assert settings.log_level == "INFO"
        assert settings.log_file == isolated_config / "termedit.log"
        assert settings.syntax_dir == isolated_config / "syntax"

    def test_values_from_file(self, isolated_config: Path, tmp_path: Path) -> None:
        isolated_config.mkdir()
        (isolated_config / "settings.json").write_text(json.dumps({
            "log_level": "debug",
            "syntax_dir": str(tmp_path / "rules"),
            "unknown": 1,
        }))
        settings = Settings.load()
        assert settings.log_level == "DEBUG"
        assert settings.syntax_dir == tmp_path / "rules"

    def test_broken_file_falls_back(self, isolated_config: Path) -> None:
        isolated_config.mkdir()
        (isolated_config / "settings.json").write_text("{not json")
        assert Settings.load() == Settings()


class TestRules:
    """Syntax rule files."""

    def test_rule_file_for(self, tmp_path: Path) -> None:
        assert rule_file_for(".GO", tmp_path) == tmp_path / "go.json"
        assert rule_file_for("", tmp_path) is None

    def test_load_rules(self, tmp_path: Path) -> None:
        (tmp_path / "go.json").write_text(json.dumps({
            "comments": ["//"],
            "statements": ["if", "for"],
            "types": ["int"],
        }))
        rules = load_rules(".go", tmp_path)
        assert rules is not None
        assert rules.statements == ("if", "for")
        assert rules.name == "go"

    def test_missing_rules(self, tmp_path: Path) -> None:
        assert load_rules(".rs", tmp_path) is None

    def test_malformed_rules_are_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "go.json").write_text("[1, 2]")
        assert load_rules(".go", tmp_path) is None

    def test_read_rules_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "go.json"
        path.write_text('{"types": "int"}')
        with pytest.raises(RuleFileError):
            read_rules(path)


class TestLogging:
    """Log file setup."""

    def test_file_handler(self, settings: Settings) -> None:
        logger = setup_logging(settings)
        assert logger.name == "termedit"
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, logging.FileHandler)
        assert handler.formatter._fmt == LOG_FORMAT
        logging.getLogger("termedit.test").warning("hello")
        handler.flush()
        assert "termedit.test - WARNING - hello" in settings.log_file.read_text()
        handler.close()

    def test_level(self, settings: Settings) -> None:
        settings.log_level = "debug"
        logger = setup_logging(settings)
        assert logger.level == logging.DEBUG
        logger.handlers[0].close()

    def test_unwritable_directory_uses_null_handler(self, settings: Settings, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("")
        settings.log_file = blocker / "sub" / "termedit.log"
        logger = setup_logging(settings)
        assert isinstance(logger.handlers[0], logging.NullHandler)
