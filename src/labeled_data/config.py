"""Configuration models for the labeled_data package."""
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from labeled_data.types import LoggingLevel

__all__ = [
    'LoggingConfig',
]

class LoggingConfig(BaseModel):
    """Configuration for the package logger.

    Attributes:
        level: Minimum logging level
        log_file: Optional path to log file. If None, logs to console only
        max_bytes: Maximum size of each log file
        backup_count: Number of backup log files to keep
        include_process_thread: Whether to include process and thread IDs in logs
    """
    level: LoggingLevel = LoggingLevel.INFO
    log_file: Optional[Path] = None
    max_bytes: int = Field(default=10_485_760, gt=0)  # 10MB
    backup_count: int = Field(default=5, ge=0)
    include_process_thread: bool = False
