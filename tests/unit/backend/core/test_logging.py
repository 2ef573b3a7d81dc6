"""
Unit Tests for Centralized Logging.

Tests the logging configuration, structured fields, and source handling.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from mindnote.backend.core import logging as logging_module

TEST_CONFIG = {
    "level": "INFO",
    "format": "json",
    "handlers": {
        "console": {"enabled": True},
        "file": {
            "enabled": False,
            "path": "logs/system.jsonl",
            "max_bytes": 1024,
            "backup_count": 1,
        },
    },
}


@pytest.fixture(autouse=True)
def _reset_logging_config():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    logging_module._logging_config = None
    yield
    logging_module._logging_config = None
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestValidSources:
    def test_valid_sources(self):
        assert logging_module.VALID_SOURCES == frozenset({"api", "cli", "internal", "unknown"})


class TestLoggingConfigLoading:
    def test_load_logging_config_is_cached(self):
        with patch(
            "mindnote.backend.core.logging.load_yaml_config",
            return_value=TEST_CONFIG,
        ) as mock_load:
            first = logging_module._load_logging_config()
            second = logging_module._load_logging_config()

        assert first is second
        mock_load.assert_called_once_with("logging.yaml")


class TestSetupLogging:
    def test_arguments_override_yaml(self):
        with patch(
            "mindnote.backend.core.logging.load_yaml_config",
            return_value=TEST_CONFIG,
        ):
            logging_module.setup_logging(level="DEBUG", format_type="console")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_file_handler_writes_under_project_root(self, tmp_path):
        config = {
            **TEST_CONFIG,
            "handlers": {
                "console": {"enabled": False},
                "file": {**TEST_CONFIG["handlers"]["file"], "enabled": True},
            },
        }
        with patch(
            "mindnote.backend.core.logging.load_yaml_config",
            return_value=config,
        ), patch(
            "mindnote.backend.core.logging.find_project_root",
            return_value=tmp_path,
        ):
            logging_module.setup_logging()

        assert (tmp_path / "logs").is_dir()
        assert len(logging.getLogger().handlers) == 1


class TestLogWithSource:
    def test_passes_source_and_fields(self):
        logger = MagicMock()
        logging_module.log_with_source(logger, "cli", "info", "Tables created", count=4)
        logger.info.assert_called_once_with("Tables created", source="cli", count=4)

    def test_invalid_level_raises(self):
        logger = MagicMock(spec=["info"])
        with pytest.raises(AttributeError):
            logging_module.log_with_source(logger, "cli", "loud", "x")
