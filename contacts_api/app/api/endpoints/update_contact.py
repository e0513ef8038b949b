"""
Replace a contact's fields.

``PUT /contacts/{id}`` is a full overwrite: ``Name``, ``CountryCode``
and ``PhoneNumber`` are all required and all replaced.  The id itself
can never be changed; an ``Id`` in the body is ignored.
"""

from typing import Union

from fastapi import APIRouter, Response, status

from contacts_api.app.schemas.contact import Contact, ContactUpdate
from contacts_api.app.services.contact_service import ContactService

router = APIRouter()


@router.put(
    "/{contact_id}",
    response_model=Contact,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Contact not found"}},
)
async def update_contact(contact_id: str, contact_in: ContactUpdate) -> Union[Contact, Response]:
    """Update an existing contact and return the new state."""
    contact = await ContactService.update_contact(contact_id, contact_in)
    if contact is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return contact
