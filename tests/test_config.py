"""Tests für Konfiguration und CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from config.defaults import DEFAULT_API_BASE_URL, default_app_config
from config.manager import ConfigManager
from config.schema import AppConfig
from main import cli
from models.remote_course import RemoteCourse
from repository import CourseSqliteRepository
from services.retrieval import CourseRetrievalService, RetrievalFailure


# ─── DEFAULT-KONFIGURATION ────────────────────────────────────────────────────

class TestAppConfig:
    def test_defaults(self):
        config = default_app_config()
        assert config.api_base_url == DEFAULT_API_BASE_URL
        assert config.database_file == "courses.db"
        assert config.request_timeout_seconds == 30.0
        assert config.log_level == "INFO"

    def test_base_url_trailing_slash_removed(self):
        config = AppConfig(api_base_url="https://example.test/")
        assert config.api_base_url == "https://example.test"

    def test_base_url_requires_scheme(self):
        with pytest.raises(ValidationError):
            AppConfig(api_base_url="example.test")

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_positive(self, timeout):
        with pytest.raises(ValidationError):
            AppConfig(request_timeout_seconds=timeout)

    def test_log_level_normalized(self):
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    def test_log_level_unknown(self):
        with pytest.raises(ValidationError):
            AppConfig(log_level="LAUT")

    def test_blank_database_file(self):
        with pytest.raises(ValidationError):
            AppConfig(database_file=" ")


# ─── CONFIG-MANAGER ───────────────────────────────────────────────────────────

class TestConfigManager:
    def _manager(self, tmp_path: Path) -> ConfigManager:
        mgr = ConfigManager()
        mgr.CONFIG_DIR = tmp_path
        mgr.DEFAULT_CONFIG = tmp_path / "course_info.yaml"
        return mgr

    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Config speichern, laden und validieren, vollständiger Roundtrip."""
        mgr = self._manager(tmp_path)
        config = AppConfig(api_base_url="https://example.test",
                           database_file="x.db", request_timeout_seconds=5)
        mgr.save(config)
        assert mgr.DEFAULT_CONFIG.exists()
        assert mgr.load() == config

    def test_saved_file_has_comments(self, tmp_path: Path):
        mgr = self._manager(tmp_path)
        mgr.save(default_app_config())
        text = mgr.DEFAULT_CONFIG.read_text(encoding="utf-8")
        assert "Course-Info" in text
        assert "# Timeout pro API-Aufruf" in text

    def test_first_run_check(self, tmp_path: Path):
        mgr = self._manager(tmp_path)
        assert mgr.first_run_check() is True
        mgr.save(default_app_config())
        assert mgr.first_run_check() is False

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ConfigManager().load(tmp_path / "not_there.yaml")

    def test_load_or_default_without_file(self, tmp_path: Path):
        mgr = self._manager(tmp_path)
        assert mgr.load_or_default() == default_app_config()

    def test_load_invalid_raises_value_error(self, tmp_path: Path):
        mgr = self._manager(tmp_path)
        mgr.DEFAULT_CONFIG.write_text("request_timeout_seconds: -3\n", encoding="utf-8")
        with pytest.raises(ValueError):
            mgr.load()

    def test_load_broken_yaml_raises_value_error(self, tmp_path: Path):
        """Syntaxfehler im YAML erscheinen als ValueError, nicht als Parser-Fehler."""
        mgr = self._manager(tmp_path)
        mgr.DEFAULT_CONFIG.write_text("api_base_url: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="kein gültiges YAML"):
            mgr.load()

    def test_partial_file_uses_defaults(self, tmp_path: Path):
        mgr = self._manager(tmp_path)
        mgr.DEFAULT_CONFIG.write_text("database_file: other.db\n", encoding="utf-8")
        config = mgr.load()
        assert config.database_file == "other.db"
        assert config.api_base_url == DEFAULT_API_BASE_URL


# ─── MAIN.PY CLI ──────────────────────────────────────────────────────────────

def _fake_courses(self, author_id):
    return [
        RemoteCourse(id="c1", title="Aktiv", duration="00:45:10.5",
                     content_url="/library/courses/c1", is_retired=False),
        RemoteCourse(id="c2", title="Alt", duration="01:00:00",
                     content_url="/library/courses/c2", is_retired=True),
    ]


class TestCli:
    def test_help(self):
        """--help gibt Usage aus."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output

    @pytest.mark.parametrize("command", ["retrieve", "list", "notes", "config"])
    def test_commands_registered(self, command):
        runner = CliRunner()
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0

    def test_retrieve_without_author_is_usage_error(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["retrieve"])
        assert result.exit_code == 2

    def test_retrieve_stores_active_courses(self, monkeypatch):
        monkeypatch.setattr(CourseRetrievalService, "get_courses_for", _fake_courses)
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["retrieve", "jane-doe", "--db", "test.db"])
            assert result.exit_code == 0, result.output
            courses = CourseSqliteRepository("test.db").get_all_courses()
        assert [c.id for c in courses] == ["c1"]
        assert courses[0].length == 45
        assert courses[0].url == "https://app.pluralsight.com/library/courses/c1"

    def test_retrieve_failure_exits_nonzero(self, monkeypatch):
        def _fail(self, author_id):
            raise RetrievalFailure("Status 500", status_code=500)

        monkeypatch.setattr(CourseRetrievalService, "get_courses_for", _fail)
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["retrieve", "jane-doe", "--db", "test.db"])
        assert result.exit_code == 1
        assert "Abruf fehlgeschlagen" in result.output

    def test_retrieve_invalid_base_url(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["retrieve", "jane-doe", "--base-url", "ftp://x"])
        assert result.exit_code == 1
        assert "Konfiguration ungültig" in result.output

    def test_broken_config_file_exits_cleanly(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("config").mkdir()
            Path("config/course_info.yaml").write_text("log_level: \"INFO\n", encoding="utf-8")
            result = runner.invoke(cli, ["list", "--db", "test.db"])
        assert result.exit_code == 1
        assert "Konfiguration ungültig" in result.output

    def test_list_and_notes(self, monkeypatch):
        monkeypatch.setattr(CourseRetrievalService, "get_courses_for", _fake_courses)
        runner = CliRunner()
        with runner.isolated_filesystem():
            runner.invoke(cli, ["retrieve", "jane-doe", "--db", "test.db"])

            result = runner.invoke(cli, ["notes", "c1", "Ansehen!", "--db", "test.db"])
            assert result.exit_code == 0, result.output

            result = runner.invoke(cli, ["list", "--db", "test.db"])
            assert result.exit_code == 0
            assert "c1" in result.output
            courses = CourseSqliteRepository("test.db").get_all_courses()
        assert courses[0].notes == "Ansehen!"

    def test_notes_unknown_course(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["notes", "fehlt", "Text", "--db", "test.db"])
        assert result.exit_code == 1
        assert "fehlt" in result.output

    def test_notes_blank_text(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["notes", "c1", "  ", "--db", "test.db"])
        assert result.exit_code == 1
        assert "Ungültige Notiz" in result.output

    def test_list_empty(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["list", "--db", "test.db"])
        assert result.exit_code == 0
        assert "Keine Kurse" in result.output

    def test_config_init_and_show(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["config", "init"])
            assert result.exit_code == 0
            assert Path("config/course_info.yaml").exists()

            result = runner.invoke(cli, ["config", "init"])
            assert result.exit_code == 1

            result = runner.invoke(cli, ["config", "show"])
            assert result.exit_code == 0
            assert "api_base_url" in result.output
