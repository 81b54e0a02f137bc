"""
Unit tests for logging configuration.
"""

import logging

from rich.logging import RichHandler

from viewconfig_gen.logging_config import (
    LOG_LEVEL_ENV,
    PACKAGE_LOGGER,
    get_logger,
    setup_logging,
)


class TestGetLogger:
    def test_module_names_are_kept(self):
        assert get_logger("viewconfig_gen.cli").name == "viewconfig_gen.cli"

    def test_foreign_names_are_namespaced(self):
        assert get_logger("plugin").name == "viewconfig_gen.plugin"


class TestSetupLogging:
    def test_default_level_is_warning(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

        setup_logging()

        logger = logging.getLogger(PACKAGE_LOGGER)
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert [type(h) for h in logger.handlers] == [RichHandler]

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

        setup_logging()

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")

        setup_logging("ERROR")

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        setup_logging("INFO")

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "gen.log"

        setup_logging("INFO", str(log_file))
        get_logger("viewconfig_gen.test").info("written to file")
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")
