"""
Module for named collections of labeled values.

A NamedCollection maps field names to LabeledValue instances that share one
metadata shape. It is built once from a complete mapping; entries are not
added or removed afterwards, but each entry's value and metadata stay mutable.

Lookups of unknown names raise NameNotFoundError (a KeyError), uniformly across
``get``, ``get_value``, ``get_metadata`` and ``collection[name]``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Iterator, List

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

from labeled_data.errors import NameNotFoundError
from labeled_data.types import D, M
from labeled_data.values import LabeledValue

__all__ = [
    'DataMapping',
    'NamedCollection',
]

logger = logging.getLogger(__name__)

DataMapping = Dict[str, LabeledValue]
"""Backing store of a collection: field name to labeled value."""

class NamedCollection(BaseModel, Generic[D, M]):
    """
    An ordered, name-keyed collection of labeled values.

    Type Parameters:
        D: The value shape, a mapping from field name to value type
        M: The metadata type shared by every entry

    Attributes:
        entries (DataMapping): The backing mapping. It is owned, not copied:
            the mapping passed in is the one the collection reads and mutates.

    Example:
        ```python
        settings = NamedCollection({
            'username': LabeledValue.of('TypingHare').set_metadata({
                'label': 'The username of the user.',
            }),
            'font_size': LabeledValue.of(16).set_metadata({
                'label': 'The font size.',
                'option_list': [12, 16, 20],
            }),
        })
        print(settings.get_value('font_size'))  # Outputs: 16
        print(settings.get_data())  # Outputs: {'username': 'TypingHare', 'font_size': 16}
        ```
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        protected_namespaces=()
    )

    entries: SkipValidation[DataMapping] = Field(
        ...,
        description="Mapping from field name to labeled value"
    )

    def __init__(self, entries: DataMapping, **data):
        """
        Initialize a new NamedCollection instance.

        Args:
            entries (DataMapping): Complete mapping from name to labeled value.
                Iteration follows its insertion order.
            **data: Additional keyword arguments passed to parent class
        """
        super().__init__(entries=entries, **data)
        logger.debug(
            f"{type(self).__name__} initialized",
            extra={'label_context': {'names': list(self.entries)}}
        )

    def get(self, name: str) -> LabeledValue[Any, M]:
        """
        Retrieve the labeled value registered under a name.

        Args:
            name (str): Name of the entry

        Returns:
            LabeledValue: The labeled value

        Raises:
            NameNotFoundError: If no entry exists with the given name
        """
        try:
            return self.entries[name]
        except KeyError:
            logger.debug(
                f"Lookup of unknown name '{name}'",
                extra={'label_context': {'name': name}}
            )
            raise NameNotFoundError(name, self.entries.keys()) from None

    def get_value(self, name: str) -> Any:
        """
        Get the current value of an entry.

        Raises:
            NameNotFoundError: If no entry exists with the given name
        """
        return self.get(name).get_value()

    def get_metadata(self, name: str) -> M:
        """
        Get the live metadata record of an entry.

        Raises:
            NameNotFoundError: If no entry exists with the given name
        """
        return self.get(name).get_metadata()

    def exist(self, name: str) -> bool:
        """Check whether an entry exists with the given name."""
        return name in self.entries

    def names(self) -> List[str]:
        """Get the names of all entries, in insertion order."""
        return list(self.entries)

    def get_list(self) -> List[LabeledValue[Any, M]]:
        """
        Get all labeled values, in insertion order.

        Returns:
            List[LabeledValue]: A new list on every call. Changing the list
                does not change the collection.
        """
        return list(self.entries.values())

    def get_data_mapping(self) -> DataMapping:
        """
        Get the backing name to labeled value mapping.

        This is a live view, not a snapshot. Use ``copy_data_mapping()`` for
        a shallow copy.
        """
        return self.entries

    def copy_data_mapping(self) -> DataMapping:
        """Get a shallow copy of the backing mapping."""
        return dict(self.entries)

    def for_each(self, callback: Callable[[LabeledValue[Any, M], str], Any]) -> None:
        """
        Call ``callback(labeled_value, name)`` once per entry, in insertion order.

        Return values of the callback are ignored.

        Example:
            ```python
            def add_ten(labeled_value, name):
                if name.lower().endswith('age'):
                    labeled_value.set_value(labeled_value.value + 10)

            collection.for_each(add_ten)
            ```
        """
        for name, labeled_value in self.entries.items():
            callback(labeled_value, name)

    def map(self, callback: Callable[[LabeledValue[Any, M], str], Any]) -> Dict[str, Any]:
        """
        Build a plain mapping from each name to ``callback(labeled_value, name)``.

        Args:
            callback: Transformation applied to each entry

        Returns:
            Dict[str, Any]: New mapping, in insertion order
        """
        return {
            name: callback(labeled_value, name)
            for name, labeled_value in self.entries.items()
        }

    def get_data(self) -> D:
        """Get a plain mapping from each name to its current value."""
        return self.map(lambda labeled_value, name: labeled_value.get_value())

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        """Iterate over entry names in insertion order."""
        return iter(self.entries)

    def __getitem__(self, name: str) -> LabeledValue[Any, M]:
        """Get entry by name. Same policy as ``get``."""
        return self.get(name)
