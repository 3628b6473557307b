"""Tests for loader settings and logging setup."""

import logging

from jobportal_config.logging_config import configure_logging, get_logger
from jobportal_config.settings import LoaderSettings


class TestLoaderSettings:

    def test_defaults(self, monkeypatch):
        for name in ("JOBPORTAL_ENV_FILE", "JOBPORTAL_ENV_FILE_ENCODING", "JOBPORTAL_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = LoaderSettings()
        assert settings.ENV_FILE == ".env"
        assert settings.ENV_FILE_ENCODING == "utf-8"
        assert settings.LOG_LEVEL == "INFO"

    def test_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("JOBPORTAL_ENV_FILE", "/etc/jobportal/app.env")
        monkeypatch.setenv("JOBPORTAL_LOG_LEVEL", "debug")
        settings = LoaderSettings()
        assert settings.ENV_FILE == "/etc/jobportal/app.env"
        assert settings.LOG_LEVEL == "debug"

    def test_unprefixed_names_ignored(self, monkeypatch):
        monkeypatch.delenv("JOBPORTAL_ENV_FILE", raising=False)
        monkeypatch.setenv("ENV_FILE", "other.env")
        assert LoaderSettings().ENV_FILE == ".env"


class TestLogging:

    def test_get_logger(self):
        logger = get_logger("jobportal_config.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "jobportal_config.test"

    def test_second_configure_adds_no_handler(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        configure_logging("DEBUG")
        configure_logging("DEBUG")

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
