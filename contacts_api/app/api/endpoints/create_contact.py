"""
Create a contact.

``POST /contacts`` stores a new contact and echoes it back with the
server-assigned id.  The response is a plain 200 rather than 201.
"""

from fastapi import APIRouter, status

from contacts_api.app.schemas.contact import Contact, ContactCreate
from contacts_api.app.services.contact_service import ContactService

router = APIRouter()


@router.post("", response_model=Contact, status_code=status.HTTP_200_OK)
async def create_contact(contact_in: ContactCreate) -> Contact:
    """Create a new contact and return it, including its ``Id``."""
    return await ContactService.create_contact(contact_in)
