"""
Factory for labeled values that share default metadata.
"""
from __future__ import annotations

import copy
import logging
from typing import Generic, Optional

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

from labeled_data.types import M, T
from labeled_data.values import LabeledValue

__all__ = [
    'LabeledValueFactory',
]

logger = logging.getLogger(__name__)

class LabeledValueFactory(BaseModel, Generic[M]):
    """
    Creates LabeledValue instances stamped with a default metadata record.

    The factory is frozen: its configuration cannot change after construction.

    Attributes:
        default_metadata (M | None): Metadata applied to every created value.
            None leaves created values with an empty record.
        clone_metadata (bool): If True, every created value gets its own
            shallow copy of ``default_metadata``. If False, all created values
            share the very same record, and a change made through one of them
            is visible through all.

    Example:
        ```python
        factory = LabeledValueFactory({'state': 'OK'})
        count = factory.create(5)
        greeting = factory.create('Hello world!')
        ```
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True
    )

    default_metadata: SkipValidation[Optional[M]] = Field(
        default=None,
        description="Metadata applied to created values"
    )
    clone_metadata: bool = Field(
        default=True,
        description="Whether each created value gets its own copy of the default metadata"
    )

    def __init__(self, default_metadata: Optional[M] = None, clone_metadata: bool = True, **data):
        super().__init__(default_metadata=default_metadata, clone_metadata=clone_metadata, **data)
        logger.debug(
            f"{type(self).__name__} initialized",
            extra={'label_context': {
                'has_default_metadata': default_metadata is not None,
                'clone_metadata': clone_metadata,
            }}
        )

    def create(self, default_value: T) -> LabeledValue[T, M]:
        """
        Create a labeled value carrying the factory's default metadata.

        Args:
            default_value (T): The default value of the new labeled value

        Returns:
            LabeledValue[T, M]: The new labeled value
        """
        labeled_value = LabeledValue.of(default_value)
        if self.default_metadata is not None:
            labeled_value.set_metadata(
                copy.copy(self.default_metadata) if self.clone_metadata else self.default_metadata
            )
        return labeled_value
