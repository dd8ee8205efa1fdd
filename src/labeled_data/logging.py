"""Logging configuration for the labeled_data package."""
import json
import logging
import logging.handlers
import sys
from datetime import datetime
from typing import Optional

from labeled_data.config import LoggingConfig

__all__ = [
    'LOGGER_NAME',
    'LabeledDataFormatter',
    'setup_logging',
]

LOGGER_NAME = 'labeled_data'

class LabeledDataFormatter(logging.Formatter):
    """Custom formatter for labeled_data logs.

    Format example:
    2024-01-24 15:30:45.123 [DEBUG   ] [labeled_data.collection] NamedCollection initialized - {"size": 3}
    2024-01-24 15:30:46.234 [DEBUG   ] [labeled_data.collection] Lookup failed - {"name": "password"}
    """

    def __init__(self, include_process_thread: bool = False):
        super().__init__()
        self.include_process_thread = include_process_thread

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        level = record.levelname.ljust(8)

        proc_thread = ""
        if self.include_process_thread:
            proc_thread = f"[P:{record.process}|T:{record.thread}] "

        msg = record.getMessage()

        extra = ""
        if hasattr(record, 'label_context'):
            try:
                extra = f" - {json.dumps(record.label_context, default=str)}"
            except (TypeError, ValueError):
                extra = f" - {str(record.label_context)}"

        log_message = f"{timestamp} [{level}] {proc_thread}[{record.name}] {msg}{extra}"

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            log_message = f"{log_message}\nException:\n{exc_text}"

        return log_message

def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Set up logging for the labeled_data package.

    Handlers installed by an earlier call are replaced, so calling this
    again with a different config does not duplicate output.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``

    Returns:
        The package logger
    """
    config = config or LoggingConfig()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(config.level.value)

    for handler in list(package_logger.handlers):
        if getattr(handler, '_labeled_data_handler', False):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = LabeledDataFormatter(include_process_thread=config.include_process_thread)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler._labeled_data_handler = True
    package_logger.addHandler(console_handler)

    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count
        )
        file_handler.setFormatter(formatter)
        file_handler._labeled_data_handler = True
        package_logger.addHandler(file_handler)

    return package_logger
