"""
Fetch a single contact by id.
"""

from typing import Union

from fastapi import APIRouter, Response, status

from contacts_api.app.schemas.contact import Contact
from contacts_api.app.services.contact_service import ContactService

router = APIRouter()


@router.get(
    "/{contact_id}",
    response_model=Contact,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Contact not found"}},
)
async def get_contact(contact_id: str) -> Union[Contact, Response]:
    """Retrieve a contact.

    Returns HTTP 404 with an empty body if no contact has this id.
    """
    contact = await ContactService.get_contact(contact_id)
    if contact is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return contact
