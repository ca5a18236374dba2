"""
Base building blocks for WhatsApp outbound message models.

Every message and component is a frozen Pydantic v2 model: all WhatsApp Cloud
API constraints are checked once, when the object is constructed, and the
validated object graph is flattened into the exact JSON body the /messages
endpoint expects.
"""

import json
from collections.abc import Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def check_limit(parent: str, child: str, items: Sequence[Any], maximum: int) -> None:
    """Validate that a bounded collection holds between 1 and ``maximum`` items.

    Args:
        parent: Name of the component owning the collection
        child: Name of the collected elements
        items: The collection to check
        maximum: Maximum number of elements allowed

    Raises:
        ValueError: If the collection is empty or holds more than ``maximum`` items
    """
    if not items:
        raise ValueError(f"{parent} must have at least one {child}")
    if len(items) > maximum:
        raise ValueError(f"{parent} can't have more than {maximum} {child}")


class ClientMessage(BaseModel):
    """Base class of every sendable message.

    ``kind`` is the request discriminant: it is sent as the request ``type``
    and names the request property holding ``to_payload()``.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str]

    def to_payload(self) -> Any:
        """Return the JSON-ready structure for the type-specific request field."""
        return self.model_dump(mode="json", exclude_none=True)

    def build(self) -> str:
        """Return the wire-ready JSON string for the type-specific request field."""
        return json.dumps(self.to_payload())


class Section(BaseModel):
    """Titled, bounded group of elements (list rows or catalog products).

    Subclasses declare ``section_name``, ``child_name``, ``max_elements`` and
    implement ``elements()``.
    """

    model_config = ConfigDict(frozen=True)

    section_name: ClassVar[str]
    child_name: ClassVar[str]
    max_elements: ClassVar[int]
    title_max: ClassVar[int] = 24

    title: str | None = None

    def elements(self) -> Sequence[Any]:
        raise NotImplementedError

    @field_validator("title")
    @classmethod
    def empty_title_is_missing(cls, v):
        return v or None

    @model_validator(mode="after")
    def validate_section(self):
        """Validate element count, then title length."""
        check_limit(self.section_name, self.child_name, self.elements(), self.max_elements)
        if self.title and len(self.title) > self.title_max:
            raise ValueError(
                f"{self.section_name} title must be {self.title_max} characters or less"
            )
        return self


def require_titles_when_many(sections: Sequence[Section]) -> None:
    """Every section must carry a title once there is more than one."""
    if len(sections) > 1 and not all(section.title for section in sections):
        raise ValueError(
            "All sections must have a title if more than 1 section is provided"
        )
