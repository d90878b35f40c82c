"""Tests for logger utility."""

import logging

from crm_agent.config import Settings
from crm_agent.utils import logger as logger_module
from crm_agent.utils.logger import setup_logger, get_app_logger, get_logger, init_app_logger


class TestSetupLogger:
    """SUT: setup_logger"""

    def test_returns_logger(self):
        """Should return a Logger instance."""
        logger = setup_logger("test_logger_returns")
        assert isinstance(logger, logging.Logger)

    def test_with_level(self):
        """Setting DEBUG level should take effect."""
        logger = setup_logger("test_logger_level", log_level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_no_duplicate_handlers(self):
        """Calling multiple times should not add duplicate handlers."""
        name = "test_logger_dup"
        logger1 = setup_logger(name)
        handler_count = len(logger1.handlers)
        logger2 = setup_logger(name)
        assert len(logger2.handlers) == handler_count
        assert logger1 is logger2

    def test_file_handler(self, tmp_path):
        """A log file should get its own handler, creating the directory."""
        log_file = tmp_path / "logs" / "app.log"
        logger = setup_logger("test_logger_file", log_file=str(log_file))
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert log_file.parent.exists()
        for handler in logger.handlers:
            handler.close()


class TestGetAppLogger:
    """SUT: get_app_logger"""

    def test_default(self):
        """Should return a logger even when not explicitly initialized."""
        logger = get_app_logger()
        assert isinstance(logger, logging.Logger)

    def test_after_init(self, monkeypatch):
        """Should return the initialized application logger."""
        monkeypatch.setattr(logger_module, "app_logger", None)
        initialized = init_app_logger(Settings(_env_file=None, log_level="WARNING"))
        assert get_app_logger() is initialized
        assert initialized.name == "crm_agent"


class TestGetLogger:
    """SUT: get_logger"""

    def test_child_of_app_logger(self):
        """Component loggers should hang under the application logger."""
        logger = get_logger("db.accounts")
        assert logger.name == "crm_agent.db.accounts"
        assert logger.parent is get_app_logger()

    def test_propagates_without_own_handlers(self):
        """Child loggers should rely on the application logger's handlers."""
        logger = get_logger("api.test_component")
        assert logger.handlers == []
        assert logger.propagate is True
