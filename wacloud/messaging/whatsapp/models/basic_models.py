"""
Basic message models for WhatsApp messaging.

Pydantic schemas for text and reaction messages, plus the MessageResult
returned by every send operation.
"""

from datetime import UTC, datetime
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

from wacloud.messaging.whatsapp.utils.emoji import is_single_emoji

from .base_models import ClientMessage


class MessageResult(BaseModel):
    """Result of a messaging operation.

    Standard response model for send_message and mark_as_read.
    """

    success: bool
    message_id: str | None = None
    recipient: str | None = None
    message_type: str | None = None
    error: str | None = None
    error_code: int | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    phone_id: str | None = None  # sending phone_number_id


class Text(ClientMessage):
    """Text message.

    Body may hold formatting and URLs beginning with http:// or https://.
    Maximum length: 4096 characters.
    """

    kind: ClassVar[str] = "text"

    body: str
    preview_url: bool | None = None

    def __init__(self, body: str, preview_url: bool | None = None, **kwargs: Any):
        super().__init__(body=body, preview_url=preview_url, **kwargs)

    @field_validator("body")
    @classmethod
    def validate_body_length(cls, v):
        if len(v) > 4096:
            raise ValueError("Text body must be 4096 characters or less")
        return v

    @field_validator("preview_url")
    @classmethod
    def drop_disabled_preview(cls, v):
        return v or None


class Reaction(ClientMessage):
    """Reaction to a previously received message.

    An empty emoji removes a reaction previously sent.
    """

    kind: ClassVar[str] = "reaction"

    message_id: str
    emoji: str = ""

    def __init__(self, message_id: str, emoji: str = "", **kwargs: Any):
        super().__init__(message_id=message_id, emoji=emoji, **kwargs)

    @field_validator("message_id")
    @classmethod
    def validate_message_id(cls, v):
        if not v:
            raise ValueError("Reaction must have a message id")
        return v

    @field_validator("emoji")
    @classmethod
    def validate_emoji(cls, v):
        if v and not is_single_emoji(v):
            raise ValueError("Reaction emoji must be a single emoji")
        return v
