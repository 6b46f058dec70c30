"""
Record Store Abstract Base Class

Defines the interface contract for all store implementations.
Services only talk to this interface, so the in-memory store can be
replaced by a persistent one (or by a fake in tests) without touching
the validation chain.

Design Pattern: Strategy Pattern
    - Services receive their store by injection
    - New backends can be added without modifying the services

Author: Khalil Bannouri
Version: 3.0.0
"""

from abc import ABC, abstractmethod
from typing import ContextManager, Generic, Optional, Protocol, TypeVar


class Record(Protocol):
    id: str


RecordT = TypeVar("RecordT", bound=Record)


class BaseStore(ABC, Generic[RecordT]):
    """
    Abstract base class for record stores.

    A store is an ordered collection of records keyed by ``id``.
    Insertion order is preserved by ``list()``.

    Example:
        >>> store = get_order_store()
        >>> with store.locked():
        ...     order = store.get("1")
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the storage backend.

        Returns:
            str: Backend name (e.g., "memory")
        """
        pass

    @abstractmethod
    def locked(self) -> ContextManager:
        """
        Exclusive access to the store.

        Services hold it across the lookup, the validation chain and the
        mutation of a single request.
        """
        pass

    @abstractmethod
    def list(self) -> list[RecordT]:
        """Return every record in insertion order."""
        pass

    @abstractmethod
    def get(self, record_id: str) -> Optional[RecordT]:
        """Return the record with this ID, or None."""
        pass

    @abstractmethod
    def next_id(self) -> str:
        """
        Compute the ID for the next created record.

        Returns:
            str: A numeric string never used by this store before
        """
        pass

    @abstractmethod
    def add(self, record: RecordT) -> RecordT:
        """
        Append a new record.

        Raises:
            ValueError: If a record with the same ID already exists
        """
        pass

    @abstractmethod
    def save(self, record: RecordT) -> RecordT:
        """
        Persist changes made to an existing record.

        Raises:
            KeyError: If the record is not in the store
        """
        pass

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """
        Remove a record.

        Returns:
            bool: True if a record was removed, False if it was already absent
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of records held."""
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Verify the store is usable.

        Returns:
            bool: True if reads and writes can be served
        """
        pass
