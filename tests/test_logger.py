"""Tests for the package logger."""

import logging

from stocksim.utils.logger import SimulationLogger, get_logger, setup_logging


def test_get_logger_returns_registered_instance():
    first = get_logger("stocksim.tests.registry")
    second = get_logger("stocksim.tests.registry")

    assert first is second
    assert isinstance(first, SimulationLogger)


def test_setup_logging_updates_existing_loggers():
    logger = get_logger("stocksim.tests.level")
    try:
        setup_logging(level="DEBUG", console_output=False)
        assert logger.is_enabled_for(logging.DEBUG)
        assert logger.logger.handlers == []

        setup_logging(level="WARNING", console_output=False)
        assert not logger.is_enabled_for(logging.INFO)
    finally:
        setup_logging(level="INFO")


def test_file_output(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = get_logger("stocksim.tests.file")
    try:
        setup_logging(level="INFO", log_file=str(log_file), console_output=False, file_output=True)
        logger.log_run_completion("Sampling", 1.5, {'succeeded': 3})
        for handler in logger.logger.handlers:
            handler.flush()

        assert "Sampling completed in 1.50s - succeeded: 3" in log_file.read_text(encoding="utf-8")
    finally:
        setup_logging(level="INFO")
