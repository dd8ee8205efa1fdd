"""
Module for single labeled values.

A labeled value pairs one value with an independently typed metadata record
(labels, visibility, option lists, ...) and remembers the default value it was
created with. Value and metadata shapes are type-level contracts only: nothing
here validates, coerces or copies them.

Classes:
    LabeledValue: A value, its immutable default, and a metadata record

Types:
    UnknownLabeledValue: LabeledValue whose value type is not known statically
"""
from __future__ import annotations

import copy
from typing import Any, Generic, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    SkipValidation,
)

from labeled_data.types import M, T

__all__ = [
    'LabeledValue',
    'UnknownLabeledValue',
]

class LabeledValue(BaseModel, Generic[T, M]):
    """
    A value container with an immutable default and attached metadata.

    Type Parameters:
        T: The type of the value
        M: The type of the metadata record

    Attributes:
        default_value (T): Value given at creation, frozen afterwards
        _value (T): The current value
        _metadata (M): The metadata record. Held by reference, never copied
            unless asked for

    Properties:
        value (T): Access or modify the current value

    Example:
        ```python
        dark_mode = LabeledValue.of(True).set_metadata({
            'label': 'Dark Mode',
            'description': 'Whether to turn on the dark mode.',
        })
        dark_mode.value = False
        print(dark_mode.get_default_value())  # Outputs: True
        print(dark_mode.get_meta('label'))  # Outputs: Dark Mode
        ```
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        protected_namespaces=()
    )

    default_value: SkipValidation[T] = Field(
        ...,
        frozen=True,
        description="Default value of this labeled value"
    )
    _value: T = PrivateAttr()
    _metadata: M = PrivateAttr(default_factory=dict)

    def __init__(self, default_value: T, **data):
        """
        Initialize a new LabeledValue instance.

        Args:
            default_value (T): The default value. The current value starts
                out equal to it. Any value, None included, is accepted.
            **data: Additional keyword arguments passed to parent class
        """
        super().__init__(default_value=default_value, **data)
        self._value = self.default_value

    @classmethod
    def of(cls, default_value: T) -> Self:
        """
        Create a labeled value with empty metadata.

        Args:
            default_value (T): The default value

        Returns:
            Self: New instance whose current value equals the default

        Example:
            ```python
            font_size = LabeledValue.of(16)
            greeting = LabeledValue.of('Hello world!')
            ```
        """
        return cls(default_value)

    @property
    def value(self) -> T:
        """The current value."""
        return self._value

    @value.setter
    def value(self, new_value: T):
        self._value = new_value

    def get_value(self) -> T:
        """Return the current value."""
        return self._value

    def set_value(self, new_value: T) -> Self:
        """
        Set the current value.

        Args:
            new_value (T): Value to store

        Returns:
            Self: Returns self for method chaining
        """
        self._value = new_value
        return self

    def get_default_value(self) -> T:
        """Return the default value given at creation."""
        return self.default_value

    def get_meta(self, name: str, default: Any = None) -> Any:
        """
        Read a single metadata field.

        Reading a field that was never set is not an error.

        Args:
            name (str): Name of the metadata field
            default (Any, optional): Returned when the field is not set.
                Defaults to None.

        Returns:
            Any: The field's value, or ``default``
        """
        return self._metadata.get(name, default)

    def set_meta(self, name: str, value: Any) -> None:
        """
        Write a single metadata field.

        Setting a field to None stores None; it is not a read.

        Args:
            name (str): Name of the metadata field
            value (Any): Value to store
        """
        self._metadata[name] = value

    def get_metadata(self) -> M:
        """
        Return the metadata record.

        This is the live record, not a snapshot: changes made through it are
        visible through this labeled value and every other holder of the same
        record. Use ``copy_metadata()`` for a snapshot.
        """
        return self._metadata

    def copy_metadata(self) -> M:
        """Return a shallow copy of the metadata record."""
        return copy.copy(self._metadata)

    def set_metadata(self, metadata: M) -> Self:
        """
        Replace the metadata record wholesale.

        The record is stored by reference. Passing the same record to several
        labeled values makes them share it.

        Args:
            metadata (M): The new metadata record

        Returns:
            Self: Returns self for method chaining
        """
        self._metadata = metadata
        return self

    def clone(self, copy_metadata: bool = True) -> Self:
        """
        Create a new labeled value with the same default and current value.

        Args:
            copy_metadata (bool, optional): If True, the clone gets a shallow
                copy of the metadata record. If False, the clone shares this
                instance's record. Defaults to True.

        Returns:
            Self: The clone, of the same class as this instance

        Example:
            ```python
            original = LabeledValue.of('Hello world!').set_metadata({'length': 12})
            original.set_value('Bye!')
            twin = original.clone()
            twin.set_meta('length', 4)
            print(original.get_meta('length'))  # Outputs: 12
            ```
        """
        metadata = self._metadata
        return (
            self.model_copy()
            .set_metadata(copy.copy(metadata) if copy_metadata else metadata)
            .set_value(self._value)
        )

    def __repr_args__(self):
        yield 'default_value', self.default_value
        yield 'value', self._value
        yield 'metadata', self._metadata

UnknownLabeledValue = LabeledValue[Any, Any]
"""Labeled value whose value type is not known statically."""
