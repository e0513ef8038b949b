"""
Service layer for contacts.

This module provides CRUD operations over the in-memory contact store.
Identifiers are random UUID4 strings generated here, once, when a
contact is created.  Lookups that miss return ``None`` (or ``False``
for removal) and leave it to the caller to turn that into a 404.

Storage failures (``StorageError``) are not caught: they propagate to
the application's exception handler and surface as a 500 for that
request only.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from contacts_api.app.core.db import get_store
from contacts_api.app.schemas.contact import Contact, ContactCreate, ContactUpdate

logger = logging.getLogger(__name__)


class ContactService:
    """Service class for managing contacts."""

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    @classmethod
    async def create_contact(cls, data: ContactCreate) -> Contact:
        """Store a new contact and return it with its assigned id."""
        contact = Contact(
            id=cls._new_id(),
            name=data.name,
            country_code=data.country_code,
            phone_number=data.phone_number,
        )
        get_store().add(contact)
        logger.info("Created contact %s", contact.id)
        return contact

    @classmethod
    async def get_contact(cls, contact_id: str) -> Optional[Contact]:
        """Retrieve a single contact by id, or ``None`` if it does not exist."""
        contact = get_store().get(contact_id)
        if contact is None:
            logger.debug("Contact %s not found", contact_id)
        return contact

    @classmethod
    async def list_contacts(cls) -> List[Contact]:
        """Return every contact.  Order is unspecified."""
        return get_store().list_all()

    @classmethod
    async def update_contact(cls, contact_id: str, data: ContactUpdate) -> Optional[Contact]:
        """Overwrite all mutable fields of an existing contact.

        The id never changes.  Returns the updated contact, or ``None``
        if there is no contact with ``contact_id``.
        """
        store = get_store()
        current = store.get(contact_id)
        if current is None:
            logger.debug("Contact %s not found for update", contact_id)
            return None
        updated = current.model_copy(
            update={
                "name": data.name,
                "country_code": data.country_code,
                "phone_number": data.phone_number,
            }
        )
        # The record may have been removed between the lookup and the write.
        if not store.replace(updated):
            logger.debug("Contact %s removed before update", contact_id)
            return None
        logger.info("Updated contact %s", contact_id)
        return updated

    @classmethod
    async def remove_contact(cls, contact_id: str) -> bool:
        """Delete a contact.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        removed = get_store().remove(contact_id)
        if removed:
            logger.info("Removed contact %s", contact_id)
        else:
            logger.debug("Contact %s not found for removal", contact_id)
        return removed
