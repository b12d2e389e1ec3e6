"""
Logging utilities for the stocksim package.
Gives every module the same format and lets batch runs and the CLI switch
level, console and file output in one place.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Dict, Any


class SimulationLogger:
    """
    Named logger wrapper with package-wide configuration.

    Features:
    - Shared format and level across all stocksim loggers
    - Console and rotating file output
    - Helpers for run and batch progress messages
    """

    # Global configuration
    _global_config: Dict[str, Any] = {
        'level': 'INFO',
        'log_file': None,
        'console_output': True,
        'file_output': False,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'date_format': '%Y-%m-%d %H:%M:%S',
        'max_file_size': 10 * 1024 * 1024,  # 10MB
        'backup_count': 5
    }

    # Registry of all loggers
    _loggers: Dict[str, 'SimulationLogger'] = {}

    def __init__(self, name: str, level: Optional[str] = None):
        """
        Initialize the logger

        Args:
            name: Logger name (usually __name__)
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self._level_override = level
        self._configure()
        SimulationLogger._loggers[name] = self

    def _configure(self):
        """(Re)build handlers from the global config"""
        config = self._global_config
        level = self._level_override or config['level']
        self.logger.setLevel(getattr(logging, level.upper()))
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        formatter = logging.Formatter(config['format'], datefmt=config['date_format'])

        if config['console_output']:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if config['file_output'] and config['log_file']:
            log_path = Path(config['log_file'])
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=config['max_file_size'],
                backupCount=config['backup_count'],
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        # Handlers are attached here, so don't duplicate through the root logger
        self.logger.propagate = False

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    # Standard logging methods
    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def critical(self, message: str):
        self.logger.critical(message)

    # Simulation-specific logging methods
    def log_run_start(self, run_name: str, settings: Dict[str, Any]):
        """Log the settings a run starts with"""
        setting_str = ", ".join(f"{k}={v}" for k, v in settings.items())
        self.info(f"🚀 {run_name} started - {setting_str}")

    def log_run_completion(self, run_name: str, duration: float,
                           details: Optional[Dict[str, Any]] = None):
        """Log run completion with timing and details"""
        message = f"✅ {run_name} completed in {duration:.2f}s"
        if details:
            detail_str = ", ".join(f"{k}: {v}" for k, v in details.items())
            message += f" - {detail_str}"
        self.info(message)

    def log_batch_progress(self, current: int, total: int, details: str = ""):
        percentage = (current / total) * 100 if total > 0 else 0
        message = f"📊 Samples: {current:,}/{total:,} ({percentage:.1f}%)"
        if details:
            message += f" - {details}"
        self.info(message)

    def log_error_with_context(self, error: Exception, context: str = ""):
        """Log error with context information"""
        message = f"❌ Error in {context}: {error}" if context else f"❌ Error: {error}"
        self.error(message)

    # Configuration methods
    @classmethod
    def configure_global(cls, **kwargs):
        """Configure global logging settings and apply them to existing loggers"""
        cls._global_config.update(kwargs)
        for logger in cls._loggers.values():
            logger._configure()


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> SimulationLogger:
    """
    Get or create a logger instance

    Args:
        name: Logger name (defaults to 'stocksim')
        level: Logging level, overriding the global level for this logger

    Returns:
        SimulationLogger instance
    """
    if name is None:
        name = "stocksim"

    if name in SimulationLogger._loggers:
        return SimulationLogger._loggers[name]

    return SimulationLogger(name, level)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  console_output: bool = True, file_output: bool = False):
    """
    Setup global logging configuration

    Args:
        level: Logging level
        log_file: Optional log file path
        console_output: Enable console output
        file_output: Enable file output (needs log_file)
    """
    SimulationLogger.configure_global(
        level=level,
        log_file=log_file,
        console_output=console_output,
        file_output=file_output
    )
