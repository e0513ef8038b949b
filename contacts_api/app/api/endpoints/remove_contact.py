"""
Delete a contact.
"""

from fastapi import APIRouter, Response, status

from contacts_api.app.services.contact_service import ContactService

router = APIRouter()


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Contact not found"}},
)
async def remove_contact(contact_id: str) -> Response:
    """Delete a contact permanently.  Returns 204, or 404 if it does not exist."""
    removed = await ContactService.remove_contact(contact_id)
    if not removed:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
