"""Tests for config loading and validation."""

from pathlib import Path

import pytest

from cli.config import load_config
from cli.config_models import AppConfig


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("cli.config.find_config", lambda: None)

        config = load_config()

        assert config.logging.level == "WARNING"
        assert config.analytics.max_entries == 5000
        assert config.analytics.history_days == 30
        assert config.analytics.insight_limit == 4
        assert config.paths.mood_db == Path("~/moodjourney/moods.db").expanduser()

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "paths:\n"
            f"  journal_dir: {tmp_path / 'j'}\n"
            "  mood_db: ~/custom/moods.db\n"
            "logging:\n"
            "  level: debug\n"
            "  json: true\n"
            "analytics:\n"
            "  history_days: 7\n"
        )

        config = load_config(path)

        assert config.paths.journal_dir == tmp_path / "j"
        assert config.paths.mood_db == Path.home() / "custom" / "moods.db"
        assert config.logging.level == "DEBUG"
        assert config.logging.json_mode is True
        assert config.analytics.history_days == 7

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("paths: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    @pytest.mark.parametrize(
        "body",
        [
            "logging:\n  level: LOUD\n",
            "analytics:\n  max_entries: 0\n",
            "analytics:\n  insight_limit: 9\n",
        ],
    )
    def test_validation_errors(self, tmp_path, body):
        path = tmp_path / "config.yaml"
        path.write_text(body)

        with pytest.raises(ValueError, match="validation failed"):
            load_config(path)


class TestAppConfig:
    def test_from_dict_accepts_string_paths(self, tmp_path):
        config = AppConfig.from_dict({"paths": {"log_file": str(tmp_path / "x.log")}})
        assert config.paths.log_file == tmp_path / "x.log"

    def test_to_dict(self):
        data = AppConfig().to_dict()
        assert set(data) == {"paths", "logging", "analytics"}
        assert data["analytics"]["insight_limit"] == 4
