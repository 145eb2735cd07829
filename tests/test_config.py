# Area: Shared Tests
"""Tests for configuration loading and validation."""

import json

import pytest
from pydantic import ValidationError

from fair_rps._config import ENV_MAPPINGS, GameConfig, load_config
from fair_rps.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_key in list(ENV_MAPPINGS) + ["NO_COLOR"]:
        monkeypatch.delenv(env_key, raising=False)


class TestGameConfig:
    """Tests for the GameConfig model."""

    def test_defaults(self):
        config = GameConfig()
        assert config.moves == []
        assert config.log_file is None
        assert config.log_level == "WARNING"
        assert config.color is True

    def test_moves_from_comma_string(self):
        assert GameConfig(moves="rock,paper,scissors").moves == ["rock", "paper", "scissors"]

    def test_moves_keep_exact_labels(self):
        """No trimming: labels are used exactly as given."""
        assert GameConfig(moves=["Rock", " rock"]).moves == ["Rock", " rock"]

    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("1", True), ("YES", True),
        ("false", False), ("0", False), ("off", False),
    ])
    def test_color_flag_strings(self, value, expected):
        assert GameConfig(color=value).color is expected

    def test_bad_color_flag(self):
        with pytest.raises(ValidationError):
            GameConfig(color="maybe")

    def test_log_level_normalized(self):
        assert GameConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            GameConfig(log_level="chatty")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_sources(self):
        assert load_config(None, dotenv=False) == {}

    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"moves": ["a", "b", "c"], "color": False}), encoding="utf-8")
        config = load_config(str(path), dotenv=False)
        assert config == {"moves": ["a", "b", "c"], "color": False}

    def test_missing_file_is_ignored(self, tmp_path):
        assert load_config(str(tmp_path / "missing.json"), dotenv=False) == {}

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"moves": ["a", "b", "c"]}), encoding="utf-8")
        monkeypatch.setenv("FAIR_RPS_MOVES", "x,y,z")
        monkeypatch.setenv("FAIR_RPS_LOG_LEVEL", "info")
        config = load_config(str(path), dotenv=False)
        assert GameConfig(**config).moves == ["x", "y", "z"]
        assert GameConfig(**config).log_level == "INFO"

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert load_config(None, dotenv=False)["color"] is False

    def test_dotenv_file_loaded(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FAIR_RPS_LOG_FILE=game.log\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        # Record the variable so monkeypatch removes what load_dotenv sets
        monkeypatch.setenv("FAIR_RPS_LOG_FILE", "")
        monkeypatch.delenv("FAIR_RPS_LOG_FILE")
        config = load_config(None)
        assert config["log_file"] == "game.log"


class TestLoadConfigErrors:
    """Unusable config files raise ConfigError instead of leaking parser errors."""

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path), dotenv=False)
        assert exc_info.value.path == str(path)

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps(["rock", "paper", "scissors"]), encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path), dotenv=False)
        assert "JSON object" in exc_info.value.reason

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path), dotenv=False)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_bytes(b'{"moves": "\xff"}')
        with pytest.raises(ConfigError):
            load_config(str(path), dotenv=False)

    def test_is_a_value_error(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(str(path), dotenv=False)
