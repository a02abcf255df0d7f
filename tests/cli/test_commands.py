"""CLI command tests using Click CliRunner.

Strategy: point config at a temp directory so get_components builds real
stores there. Each test drives commands end to end through the ``cli`` group.
"""

import json
import logging
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cli.config_models import AppConfig
from cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def app_config(tmp_path):
    return AppConfig.from_dict(
        {
            "paths": {
                "journal_dir": str(tmp_path / "journal"),
                "mood_db": str(tmp_path / "moods.db"),
                "log_file": str(tmp_path / "logs" / "app.log"),
            }
        }
    )


@pytest.fixture(autouse=True)
def patched_config(app_config):
    with patch("cli.main.load_config", return_value=app_config), patch(
        "cli.config.load_config", return_value=app_config
    ):
        yield app_config
    root = logging.getLogger()
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()


@pytest.fixture
def components(app_config):
    from cli.utils import get_components

    return get_components()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class TestMain:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("mood", "journal", "today", "export", "import"):
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_config_error_exits(self, runner):
        with patch("cli.main.load_config", side_effect=ValueError("bad yaml")):
            result = runner.invoke(cli, ["today"])
        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_log_file_written(self, runner, app_config):
        runner.invoke(cli, ["mood", "log", "joy"])
        assert app_config.paths.log_file.exists()


class TestMoodCommands:
    def test_log_and_list(self, runner, components):
        result = runner.invoke(cli, ["mood", "log", "joy", "-i", "0.8", "-a", "Exercise,Music", "-n", "run"])
        assert result.exit_code == 0, result.output
        assert "Logged" in result.output

        entries = components["mood_store"].list_all()
        assert len(entries) == 1
        assert entries[0].mood == "joy"
        assert entries[0].intensity == 0.8
        assert entries[0].activities == ["Exercise", "Music"]
        assert entries[0].notes == "run"

        result = runner.invoke(cli, ["mood", "list"])
        assert result.exit_code == 0
        assert "joy" in result.output

    def test_log_uses_standard_activity_spelling(self, runner, components):
        result = runner.invoke(cli, ["mood", "log", "joy", "-a", "exercise,MUSIC", "-a", "Exercise"])

        assert result.exit_code == 0, result.output
        assert components["mood_store"].list_all()[0].activities == ["Exercise", "Music", "Exercise"]
        assert "Custom activities" not in result.output

    def test_log_notes_custom_activities(self, runner, components):
        result = runner.invoke(cli, ["mood", "log", "calm", "-a", "Gardening,rest"])

        assert result.exit_code == 0, result.output
        assert "Custom activities: Gardening" in result.output
        assert components["mood_store"].list_all()[0].activities == ["Gardening", "Rest"]

    def test_log_rejects_unknown_mood(self, runner):
        result = runner.invoke(cli, ["mood", "log", "ecstatic"])
        assert result.exit_code != 0

    def test_log_rejects_out_of_range_intensity(self, runner):
        result = runner.invoke(cli, ["mood", "log", "joy", "-i", "1.5"])
        assert result.exit_code != 0

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["mood", "list"])
        assert result.exit_code == 0
        assert "No mood entries" in result.output

    def test_delete(self, runner, components, mood_entry):
        entry = mood_entry("calm", 0.5, [], _now_iso())
        components["mood_store"].save(entry)

        result = runner.invoke(cli, ["mood", "delete", entry.id])
        assert result.exit_code == 0
        assert components["mood_store"].count() == 0

        result = runner.invoke(cli, ["mood", "delete", entry.id])
        assert result.exit_code == 1
        assert "Not found" in result.output

    def test_clear_requires_confirmation(self, runner, components, mood_entry):
        components["mood_store"].save(mood_entry("calm", 0.5))

        result = runner.invoke(cli, ["mood", "clear"], input="n\n")
        assert result.exit_code != 0
        assert components["mood_store"].count() == 1

        result = runner.invoke(cli, ["mood", "clear", "--yes"])
        assert result.exit_code == 0
        assert "Removed 1" in result.output
        assert components["mood_store"].count() == 0

    def test_correlations(self, runner, components, mood_entry):
        rows = [("sadness", 0.3, ["Work"])] * 3 + [("joy", 0.9, ["Reading"])] * 3
        for i, (mood, intensity, activities) in enumerate(rows):
            components["mood_store"].save(mood_entry(mood, intensity, activities, f"2024-01-0{i + 1}T09:00:00Z"))

        result = runner.invoke(cli, ["mood", "correlations"])

        assert result.exit_code == 0, result.output
        assert "Reading" in result.output
        assert "Consider balancing Work" in result.output

    def test_correlations_empty(self, runner):
        result = runner.invoke(cli, ["mood", "correlations"])
        assert result.exit_code == 0
        assert "No activity data" in result.output


class TestJournalCommands:
    def test_add_with_content(self, runner, components):
        result = runner.invoke(
            cli,
            ["journal", "add", "--title", "Good one", "-m", "joy", "-t", "run", "I feel happy and grateful"],
        )

        assert result.exit_code == 0, result.output
        assert "Created" in result.output
        assert "Dominant emotion: joy" in result.output

        entries = components["journal_storage"].list_all()
        assert len(entries) == 1
        assert entries[0].title == "Good one"
        assert entries[0].tags == ["run"]

    def test_add_logs_length_not_content(self, runner, components):
        with patch("cli.commands.journal.logger") as logger:
            result = runner.invoke(cli, ["journal", "add", "-a", "reading", "Private thoughts here"])

        assert result.exit_code == 0, result.output
        logger.info.assert_called_once()
        _, kwargs = logger.info.call_args
        assert kwargs["chars"] == len("Private thoughts here")
        assert "content" not in kwargs
        assert "Private thoughts here" not in str(logger.info.call_args)
        assert components["journal_storage"].list_all()[0].activities == ["Reading"]

    def test_add_opens_editor(self, runner, components):
        with patch("click.edit", return_value="Written in the editor, feeling sad"):
            result = runner.invoke(cli, ["journal", "add"])

        assert result.exit_code == 0, result.output
        assert "sadness" in result.output
        assert components["journal_storage"].count() == 1

    def test_add_cancelled_editor(self, runner, components):
        with patch("click.edit", return_value=None):
            result = runner.invoke(cli, ["journal", "add"])

        assert result.exit_code == 0
        assert "cancelled" in result.output
        assert components["journal_storage"].count() == 0

    def test_list_and_view(self, runner, components, sample_journal_entries):
        for entry in sample_journal_entries:
            components["journal_storage"].save(entry)

        result = runner.invoke(cli, ["journal", "list"])
        assert result.exit_code == 0
        assert "Morning run" in result.output

        result = runner.invoke(cli, ["journal", "list", "--tag", "daily"])
        assert "Quiet day" in result.output
        assert "Morning run" not in result.output

        entry_id = sample_journal_entries[0].id
        result = runner.invoke(cli, ["journal", "view", entry_id])
        assert result.exit_code == 0
        assert "Went for a run" in result.output

    def test_view_missing(self, runner):
        result = runner.invoke(cli, ["journal", "view", "nope"])
        assert result.exit_code == 1
        assert "Not found" in result.output

    def test_view_rejects_unsafe_id(self, runner):
        result = runner.invoke(cli, ["journal", "view", "../etc"])
        assert result.exit_code == 1
        assert "Invalid entry id" in result.output

    def test_search(self, runner, components, sample_journal_entries):
        for entry in sample_journal_entries:
            components["journal_storage"].save(entry)

        result = runner.invoke(cli, ["journal", "search", "deadline"])
        assert "Work stress" in result.output
        assert "Quiet day" not in result.output

        result = runner.invoke(cli, ["journal", "search", "-m", "neutral"])
        assert "Quiet day" in result.output

        result = runner.invoke(cli, ["journal", "search", "--since", "2024-01-11", "--until", "2024-01-14"])
        assert "Work stress" in result.output
        assert "Morning run" not in result.output

        result = runner.invoke(cli, ["journal", "search", "nothing-matches-this"])
        assert "No matches" in result.output

    def test_delete(self, runner, components, journal_entry):
        entry = journal_entry("bye")
        components["journal_storage"].save(entry)

        result = runner.invoke(cli, ["journal", "delete", entry.id])
        assert result.exit_code == 0
        assert components["journal_storage"].count() == 0

    def test_analyze(self, runner, components, journal_entry):
        entry = journal_entry("I was so angry and frustrated today", mood="anger", title="Rough")
        components["journal_storage"].save(entry)

        result = runner.invoke(cli, ["journal", "analyze", entry.id])

        assert result.exit_code == 0, result.output
        assert "Dominant emotion: anger" in result.output
        assert "Mood alignment: 100%" in result.output

    def test_timeline_and_insights(self, runner, components, journal_entry):
        components["journal_storage"].save(journal_entry("happy and excited", mood="joy", created_at=_now_iso()))

        result = runner.invoke(cli, ["journal", "timeline", "-p", "week"])
        assert result.exit_code == 0, result.output
        assert "Emotions by week" in result.output

        result = runner.invoke(cli, ["journal", "insights"])
        assert result.exit_code == 0, result.output
        assert "Your entries often express joy" in result.output

    def test_timeline_empty(self, runner):
        result = runner.invoke(cli, ["journal", "timeline"])
        assert result.exit_code == 0
        assert "No entries found" in result.output


class TestTodayCommand:
    def test_nothing_logged(self, runner):
        result = runner.invoke(cli, ["today"])
        assert result.exit_code == 0
        assert "Nothing logged today" in result.output

    def test_summary_panel(self, runner, components, mood_entry, journal_entry):
        components["mood_store"].save(mood_entry("joy", 0.8, ["Exercise"], _now_iso()))
        components["journal_storage"].save(journal_entry("fine", mood="joy", created_at=_now_iso()))

        result = runner.invoke(cli, ["today"])

        assert result.exit_code == 0, result.output
        assert "Mostly feeling joyful" in result.output
        assert "Top activities: Exercise" in result.output
        assert "Not enough data for trend" in result.output


class TestExportImport:
    def test_export_then_import(self, runner, components, tmp_path, mood_entry, journal_entry):
        components["mood_store"].save(mood_entry("joy", 0.8, ["Exercise"]))
        components["journal_storage"].save(journal_entry("happy"))
        out = tmp_path / "backup.json"

        result = runner.invoke(cli, ["export", str(out)])
        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text())["mood_entries"][0]["mood"] == "joy"

        components["mood_store"].clear()
        result = runner.invoke(cli, ["import", str(out)])
        assert result.exit_code == 0, result.output
        assert "Imported" in result.output
        assert components["mood_store"].count() == 1

    def test_import_bad_file(self, runner, tmp_path):
        src = tmp_path / "bad.json"
        src.write_text("{}")

        result = runner.invoke(cli, ["import", str(src)])
        assert result.exit_code == 1
        assert "Import failed" in result.output
