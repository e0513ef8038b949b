"""
In-memory storage for contact records.

This module provides the process-wide ``ContactStore`` (``get_store``),
a reset hook applied on application start (``init_db``) and the
``StorageError`` raised when the store cannot serve a request.  Records
live in a plain dictionary keyed by contact id and are lost when the
process exits.

Every public operation takes the store lock for the duration of a
single dictionary access, so each call is atomic on its own.  There is
no multi-call transaction: a request performs at most one mutating call
and concurrent writes to the same id are last-write-wins.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from contacts_api.app.schemas.contact import Contact

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the store is unreachable or rejects a write."""


class ContactStore:
    """Mapping from contact id to ``Contact`` guarded by a single lock.

    Records are copied on the way in and on the way out so that callers
    can never mutate stored state without going through ``replace``.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Contact] = {}
        self._lock = threading.Lock()
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageError("Contact store is not available")

    @property
    def is_open(self) -> bool:
        return not self._closed

    def add(self, contact: Contact) -> Contact:
        """Insert a new record.

        Raises ``StorageError`` if a record with the same id exists;
        ids are issued once and never reused.
        """
        with self._lock:
            self._ensure_open()
            if contact.id in self._records:
                raise StorageError(f"Contact {contact.id} already exists")
            self._records[contact.id] = contact.model_copy()
        return contact

    def get(self, contact_id: str) -> Optional[Contact]:
        """Return a copy of the record or ``None`` if absent."""
        with self._lock:
            self._ensure_open()
            contact = self._records.get(contact_id)
        return contact.model_copy() if contact is not None else None

    def list_all(self) -> List[Contact]:
        """Return a snapshot of every record."""
        with self._lock:
            self._ensure_open()
            contacts = list(self._records.values())
        return [contact.model_copy() for contact in contacts]

    def replace(self, contact: Contact) -> bool:
        """Overwrite an existing record.

        Returns ``False`` when no record with ``contact.id`` exists.
        """
        with self._lock:
            self._ensure_open()
            if contact.id not in self._records:
                return False
            self._records[contact.id] = contact.model_copy()
        return True

    def remove(self, contact_id: str) -> bool:
        """Delete a record.  Returns ``False`` if it did not exist."""
        with self._lock:
            self._ensure_open()
            return self._records.pop(contact_id, None) is not None

    def count(self) -> int:
        with self._lock:
            self._ensure_open()
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def close(self) -> None:
        """Make the store unreachable; later calls raise ``StorageError``."""
        with self._lock:
            self._closed = True
            self._records.clear()


_store = ContactStore()


def get_store() -> ContactStore:
    """Return the process-wide contact store."""
    return _store


def init_db() -> ContactStore:
    """Replace the process-wide store with a fresh, empty one.

    Called once at application startup.  Because storage is in-memory,
    this is the whole of "initialisation"; there is nothing to migrate.
    """
    global _store
    _store = ContactStore()
    logger.info("Initialised in-memory contact store")
    return _store
