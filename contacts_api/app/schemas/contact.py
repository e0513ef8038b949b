"""
Pydantic schemas for contacts.

A contact is a name plus a phone number split into country code and
local number.  None of the text fields are validated beyond being
present: empty strings are accepted, as are duplicate phone numbers.

On the wire fields use PascalCase (``Id``, ``Name``, ``CountryCode``,
``PhoneNumber``).  Python code uses the snake_case attribute names;
request bodies may use either form.
"""

from pydantic import BaseModel, ConfigDict, Field


class ContactBase(BaseModel):
    """Fields shared by every contact payload."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Name", examples=["Alice"])
    country_code: str = Field(..., alias="CountryCode", examples=["+1"])
    phone_number: str = Field(..., alias="PhoneNumber", examples=["5551234"])


class ContactCreate(ContactBase):
    """Schema for creating a contact.  The id is always assigned by the server."""


class ContactUpdate(ContactBase):
    """Schema for updating a contact.

    All three fields are required: an update replaces the whole record
    (except the id) and never merges with the previous values.
    """


class Contact(ContactBase):
    """A stored contact, also used as the response body."""

    id: str = Field(..., alias="Id", examples=["3f2b8c1e-6a0d-4c57-9a1e-2f1d0c9b7e44"])
