"""Core type definitions for the labeled_data package."""
from enum import Enum
from typing import Any, Dict, TypeVar
import logging

__all__ = [
    'Metadata',
    'Data',
    'T',
    'M',
    'D',
    'LoggingLevel',
]

Metadata = Dict[str, Any]
"""Open mapping of descriptive fields attached to a labeled value."""

Data = Dict[str, Any]
"""Value shape of a collection: field name to field value."""

T = TypeVar('T')
M = TypeVar('M', bound=Metadata)
D = TypeVar('D', bound=Data)

class LoggingLevel(Enum):
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    CRITICAL = logging.CRITICAL
    DEBUG = logging.DEBUG

    def __str__(self):
        return logging.getLevelName(self.value)
    def __int__(self):
        return int(self.value)
    def __repr__(self):
        return repr(self.value)
