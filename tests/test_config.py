"""Tests for configuration loading."""

import logging

import pytest
from headsup.config import Config, GameConfig, LoggingConfig
from headsup.errors import ConfigError


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.game.starting_chips == 1000
        assert config.game.small_blind == 10
        assert config.game.big_blind == 20
        assert config.logging.level_number == logging.WARNING

    def test_from_file(self, tmp_path):
        path = tmp_path / "headsup.toml"
        path.write_text('[game]\nstarting_chips = 500\nbig_blind = 50\n\n[logging]\nlevel = "debug"\n')

        config = Config.from_file(path)

        assert config.game.starting_chips == 500
        assert config.game.small_blind == 10
        assert config.game.big_blind == 50
        assert config.logging.level_number == logging.DEBUG

    def test_load_from_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "headsup.toml").write_text("[game]\nsmall_blind = 25\nbig_blind = 50\n")
        monkeypatch.chdir(tmp_path)

        assert Config.load().game.small_blind == 25

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "headsup.toml"
        path.write_text("[game\n")
        with pytest.raises(ConfigError):
            Config.from_file(path)

    def test_invalid_blinds(self):
        with pytest.raises(ConfigError):
            GameConfig(small_blind=20, big_blind=10)
        with pytest.raises(ConfigError):
            GameConfig(small_blind=0)
        with pytest.raises(ConfigError):
            GameConfig(starting_chips=-5)

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError):
            LoggingConfig(level="chatty")
