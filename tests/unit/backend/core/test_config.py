"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project files (YAML configs).
Failure scenarios use tmp_path to create controlled filesystems.
"""

import pytest

from mindnote.backend.core.config import (
    AppConfig,
    find_project_root,
    get_app_config,
    get_database_url,
    get_settings,
    load_yaml_config,
    validate_project_root,
)
from mindnote.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


def _write_settings(root, **overrides):
    """Create a minimal project tree with valid YAML settings."""
    (root / ".project_root").touch()
    settings = root / "config" / "settings"
    settings.mkdir(parents=True)
    files = {
        "application.yaml": (
            "name: T\nversion: '1'\ndescription: d\nenvironment: test\n"
            "debug: false\napi_prefix: /api/v1\ndocs_enabled: false\n"
            "server:\n  host: 0.0.0.0\n  port: 9000\ncors:\n  origins: []\n"
        ),
        "database.yaml": (
            "host: db\nport: 5433\nname: notes\nuser: app\npool_size: 1\n"
            "max_overflow: 0\npool_timeout: 5\npool_recycle: 60\necho: false\n"
        ),
        "logging.yaml": (
            "level: INFO\nformat: json\nhandlers:\n  console:\n    enabled: true\n"
            "  file:\n    enabled: false\n    path: logs/x.jsonl\n"
            "    max_bytes: 100\n    backup_count: 1\n"
        ),
    }
    files.update(overrides)
    for name, content in files.items():
        (settings / name).write_text(content)


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert (root / ".project_root").exists()
        assert (root / "config" / "settings").is_dir()

    def test_finds_root_from_subdirectory(self, tmp_path, monkeypatch):
        _write_settings(tmp_path)
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert find_project_root() == tmp_path

    def test_raises_when_no_marker_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()


class TestValidateProjectRoot:
    def test_exits_when_marker_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            validate_project_root()


class TestLoadYamlConfig:
    def test_loads_project_file(self):
        config = load_yaml_config("application.yaml")
        assert config["name"] == "MindNote"

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_yaml_config("does_not_exist.yaml")


class TestAppConfig:
    """Tests for the validated YAML configuration."""

    def test_project_config_validates(self):
        config = AppConfig()
        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.database, DatabaseSchema)
        assert isinstance(config.logging, LoggingSchema)
        assert config.application.api_prefix == "/api/v1"

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_is_rejected(self, tmp_path, monkeypatch):
        _write_settings(
            tmp_path,
            **{"logging.yaml": (
                "level: INFO\nformat: json\nverbose: true\nhandlers:\n"
                "  console:\n    enabled: true\n  file:\n    enabled: false\n"
                "    path: x\n    max_bytes: 1\n    backup_count: 1\n"
            )},
        )
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ValueError, match="logging.yaml"):
            AppConfig()

    def test_missing_key_is_rejected(self, tmp_path, monkeypatch):
        _write_settings(tmp_path, **{"database.yaml": "host: db\n"})
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ValueError, match="database.yaml"):
            AppConfig()


class TestGetDatabaseUrl:
    def test_builds_asyncpg_url_from_parts(self, tmp_path, monkeypatch):
        _write_settings(tmp_path)
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DB_PASSWORD", "secret")

        assert get_database_url() == "postgresql+asyncpg://app:secret@db:5433/notes"

    def test_explicit_url_wins(self, tmp_path, monkeypatch):
        _write_settings(
            tmp_path,
            **{"database.yaml": (
                "url: sqlite+aiosqlite:///./x.db\nhost: db\nport: 5433\n"
                "name: notes\nuser: app\npool_size: 1\nmax_overflow: 0\n"
                "pool_timeout: 5\npool_recycle: 60\necho: false\n"
            )},
        )
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("DB_PASSWORD", raising=False)

        assert get_database_url() == "sqlite+aiosqlite:///./x.db"
