"""
List every contact.

No filtering, sorting or pagination: the whole store is returned.
"""

from typing import List

from fastapi import APIRouter

from contacts_api.app.schemas.contact import Contact
from contacts_api.app.services.contact_service import ContactService

router = APIRouter()


@router.get("", response_model=List[Contact])
async def get_contacts() -> List[Contact]:
    """Return all contacts (possibly an empty list)."""
    return await ContactService.list_contacts()
