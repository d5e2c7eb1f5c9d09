"""Tests for the package logging setup."""
import logging

import pytest

from shelfconfigurator.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


class TestSetupLogging:
    def test_repeated_setup_does_not_stack_handlers(self, package_logger) -> None:
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_writes_session_log_file(self, package_logger, tmp_path) -> None:
        log_file = tmp_path / "session.log"
        setup_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("shelfconfigurator.model.io").warning("Import rejected: bad text")
        for handler in package_logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "shelfconfigurator.model.io - WARNING - Import rejected: bad text" in content

    def test_preview_library_loggers_are_quietened(self, package_logger) -> None:
        setup_logging(logging.DEBUG)
        assert logging.getLogger("pyvista").level == logging.WARNING
