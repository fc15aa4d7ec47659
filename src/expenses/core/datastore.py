#!/usr/bin/env python3
"""
DataStore Protocol - Standard interface for ledger persistence.

The ledger talks to its storage only through this protocol, so the flat-file
implementation can be replaced (for example by an embedded key-value store)
without changing any caller.
"""

from datetime import datetime
from typing import Protocol, TypeVar

T = TypeVar("T")


class DataStore(Protocol[T]):
    """
    Protocol for data persistence and metadata queries.

    Type parameter T is the stored data type (the ledger uses list[Expense]).
    """

    def exists(self) -> bool:
        """
        Check if data exists in storage.

        Returns:
            True if the backing storage exists, False otherwise
        """
        ...

    def load(self) -> T:
        """
        Load all data from storage.

        Missing storage is treated as empty data, not an error.

        Raises:
            PersistenceError: If storage is unreadable or corrupt
        """
        ...

    def save(self, data: T) -> None:
        """
        Replace the stored data in full.

        Raises:
            PersistenceError: If storage cannot be written. The previously
                stored data must be left intact.
        """
        ...

    def last_modified(self) -> datetime | None:
        """
        Get timestamp of most recent data modification.

        Returns:
            datetime of last modification, or None if data doesn't exist
        """
        ...

    def age_days(self) -> int | None:
        """Get age of data in days since last modification."""
        ...

    def item_count(self) -> int | None:
        """
        Get count of records in stored data.

        Returns:
            Count of records, or None if data doesn't exist
        """
        ...

    def size_bytes(self) -> int | None:
        """Get total storage size in bytes, or None if data doesn't exist."""
        ...

    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...
