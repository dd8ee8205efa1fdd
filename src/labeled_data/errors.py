"""Custom exceptions for the labeled_data package."""
from typing import Iterable

__all__ = [
    'LabeledDataError',
    'NameNotFoundError',
]

class LabeledDataError(Exception):
    """Base class for labeled_data errors."""
    pass

class NameNotFoundError(LabeledDataError, KeyError):
    """No entry is registered under the requested name."""
    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"No entry named '{name}'. Available names: {self.available}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
