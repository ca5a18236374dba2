"""
WhatsApp specialized message models.

Provides Pydantic v2 validation models for:
- Location: Geographic location sharing with coordinates
- Contacts: One or more contact cards assembled from contact components

Contact components are either unique within a card (name, birthday, org) or
repeatable (addresses, emails, phones, urls). Repeatability is looked up by
component kind in CONTACT_COMPONENT_REPEATABLE.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .base_models import ClientMessage


class Location(ClientMessage):
    """Location message.

    The address is only displayed by WhatsApp if a name is present.
    """

    kind: ClassVar[str] = "location"

    longitude: float = Field(..., ge=-180, le=180)
    latitude: float = Field(..., ge=-90, le=90)
    name: str | None = None
    address: str | None = None

    def __init__(
        self,
        longitude: float,
        latitude: float,
        name: str | None = None,
        address: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(
            longitude=longitude, latitude=latitude, name=name, address=address, **kwargs
        )

    @field_validator("name", "address")
    @classmethod
    def empty_value_is_missing(cls, v):
        return v or None


class ContactComponentKind(str, Enum):
    """Contact card properties a component can fill."""

    NAME = "name"
    BIRTHDAY = "birthday"
    ORG = "org"
    ADDRESSES = "addresses"
    EMAILS = "emails"
    PHONES = "phones"
    URLS = "urls"


CONTACT_COMPONENT_REPEATABLE: dict[ContactComponentKind, bool] = {
    ContactComponentKind.NAME: False,
    ContactComponentKind.BIRTHDAY: False,
    ContactComponentKind.ORG: False,
    ContactComponentKind.ADDRESSES: True,
    ContactComponentKind.EMAILS: True,
    ContactComponentKind.PHONES: True,
    ContactComponentKind.URLS: True,
}


class ContactComponent(BaseModel):
    """Base class of the pieces a contact card is assembled from."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ContactComponentKind]

    def contact_value(self) -> Any:
        """Value stored in the contact card under ``kind``."""
        return self


class Address(ContactComponent):
    """Contact address. Standard type values: HOME, WORK."""

    kind: ClassVar[ContactComponentKind] = ContactComponentKind.ADDRESSES

    country: str | None = None
    country_code: str | None = None
    state: str | None = None
    city: str | None = None
    street: str | None = None
    zip: str | None = None
    type: str | None = None

    def __init__(
        self,
        country: str | None = None,
        country_code: str | None = None,
        state: str | None = None,
        city: str | None = None,
        street: str | None = None,
        zip: str | None = None,
        type: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(
            country=country,
            country_code=country_code,
            state=state,
            city=city,
            street=street,
            zip=zip,
            type=type,
            **kwargs,
        )


class Birthday(ContactComponent):
    """Contact birthday, serialized as YYYY-MM-DD."""

    kind: ClassVar[ContactComponentKind] = ContactComponentKind.BIRTHDAY

    year: str
    month: str
    day: str

    def __init__(self, year: str, month: str, day: str, **kwargs: Any):
        super().__init__(year=year, month=month, day=day, **kwargs)

    @field_validator("year")
    @classmethod
    def validate_year(cls, v):
        if len(v) != 4 or not v.isdigit():
            raise ValueError("Year must be 4 digits")
        return v

    @field_validator("month", "day")
    @classmethod
    def validate_two_digits(cls, v, info):
        if len(v) != 2 or not v.isdigit():
            raise ValueError(f"{info.field_name.capitalize()} must be 2 digits")
        return v

    def contact_value(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


class Email(ContactComponent):
    """Contact email. Standard type values: HOME, WORK."""

    kind: ClassVar[ContactComponentKind] = ContactComponentKind.EMAILS

    email: str | None = None
    type: str | None = None

    def __init__(self, email: str | None = None, type: str | None = None, **kwargs: Any):
        super().__init__(email=email, type=type, **kwargs)


class Name(ContactComponent):
    """Contact name, required for every contact card.

    Needs a formatted_name and at least one other name property.
    """

    kind: ClassVar[ContactComponentKind] = ContactComponentKind.NAME

    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None

    def __init__(
        self,
        formatted_name: str,
        first_name: str | None = None,
        last_name: str | None = None,
        middle_name: str | None = None,
        suffix: str | None = None,
        prefix: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(
            formatted_name=formatted_name,
            first_name=first_name,
            last_name=last_name,
            middle_name=middle_name,
            suffix=suffix,
            prefix=prefix,
            **kwargs,
        )

    @field_validator("first_name", "last_name", "middle_name", "suffix", "prefix")
    @classmethod
    def empty_value_is_missing(cls, v):
        return v or None

    @model_validator(mode="after")
    def validate_has_name_part(self):
        parts = (self.first_name, self.last_name, self.middle_name, self.suffix, self.prefix)
        if not any(parts):
            raise ValueError(
                "Name must have at least one of the following: "
                "first_name, last_name, middle_name, prefix, suffix"
            )
        return self


class Organization(ContactComponent):
    """Contact organization."""

    kind: ClassVar[ContactComponentKind] = ContactComponentKind.ORG

    company: str | None = None
    department: str | None = None
    title: str | None = None

    def __init__(
        self,
        company: str | None = None,
        department: str | None = None,
        title: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(company=company, department=department, title=title, **kwargs)


class Phone(ContactComponent):
    """Contact phone. Standard type values: CELL, MAIN, IPHONE, HOME, WORK."""

    kind: ClassVar[ContactComponentKind] = ContactComponentKind.PHONES

    phone: str | None = None
    type: str | None = None
    wa_id: str | None = None

    def __init__(
        self,
        phone: str | None = None,
        type: str | None = None,
        wa_id: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(phone=phone, type=type, wa_id=wa_id, **kwargs)


class Url(ContactComponent):
    """Contact URL. Standard type values: HOME, WORK."""

    kind: ClassVar[ContactComponentKind] = ContactComponentKind.URLS

    url: str | None = None
    type: str | None = None

    def __init__(self, url: str | None = None, type: str | None = None, **kwargs: Any):
        super().__init__(url=url, type=type, **kwargs)


class ContactCard(BaseModel):
    """One assembled contact, as sent on the wire."""

    model_config = ConfigDict(frozen=True)

    name: Name
    birthday: str | None = None
    org: Organization | None = None
    addresses: list[Address] | None = None
    phones: list[Phone] | None = None
    emails: list[Email] | None = None
    urls: list[Url] | None = None


def assemble_contact(components: Sequence[ContactComponent]) -> ContactCard:
    """Merge the components of a single contact into a ContactCard.

    Raises:
        ValueError: If a unique component appears twice or the name is missing
    """
    card: dict[str, Any] = {}

    for component in components:
        if not isinstance(component, ContactComponent):
            raise ValueError(
                f"Unsupported contact component: {type(component).__name__}"
            )

        kind = component.kind
        if CONTACT_COMPONENT_REPEATABLE[kind]:
            card.setdefault(kind.value, []).append(component.contact_value())
        else:
            if kind.value in card:
                raise ValueError(
                    f"Contact already has a {kind.value} component "
                    f"and {kind.value} can't be repeated"
                )
            card[kind.value] = component.contact_value()

    if ContactComponentKind.NAME.value not in card:
        raise ValueError("Contact must have a name component")

    return ContactCard(**card)


class Contacts(ClientMessage):
    """Contacts message holding one or more contact cards.

    Unlike every other message, the payload is a JSON array of cards.
    """

    kind: ClassVar[str] = "contacts"

    contacts: list[ContactCard]

    def __init__(self, *contacts: Sequence[ContactComponent], **kwargs: Any):
        super().__init__(contacts=list(contacts), **kwargs)

    @field_validator("contacts", mode="before")
    @classmethod
    def assemble_contacts(cls, v):
        if not v:
            raise ValueError("Contacts must have at least one contact")
        return [
            contact if isinstance(contact, ContactCard) else assemble_contact(contact)
            for contact in v
        ]

    def to_payload(self) -> list[dict[str, Any]]:
        return [
            contact.model_dump(mode="json", exclude_none=True) for contact in self.contacts
        ]
