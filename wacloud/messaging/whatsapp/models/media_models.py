"""
Media message models for WhatsApp messaging.

A media object references its file either by public link or by the id
returned from a previous upload. The same objects serve as interactive
headers and template header parameters.
"""

from typing import Any, ClassVar

from pydantic import field_validator, model_validator

from .base_models import ClientMessage


class Media(ClientMessage):
    """Shared fields of every media type."""

    id: str | None = None
    link: str | None = None

    def __init__(self, file: str, is_id: bool = False, **kwargs: Any):
        super().__init__(**{"id" if is_id else "link": file}, **kwargs)

    @model_validator(mode="after")
    def validate_file(self):
        if not (self.id or self.link):
            raise ValueError(f"{self.kind.capitalize()} must have a link or an id")
        return self


class Audio(Media):
    """Audio message."""

    kind: ClassVar[str] = "audio"


class Sticker(Media):
    """Sticker message."""

    kind: ClassVar[str] = "sticker"


class Image(Media):
    """Image message with optional caption."""

    kind: ClassVar[str] = "image"

    caption: str | None = None

    def __init__(
        self, image: str, is_id: bool = False, caption: str | None = None, **kwargs: Any
    ):
        super().__init__(image, is_id, caption=caption, **kwargs)

    @field_validator("caption")
    @classmethod
    def empty_caption_is_missing(cls, v):
        return v or None


class Video(Media):
    """Video message with optional caption."""

    kind: ClassVar[str] = "video"

    caption: str | None = None

    def __init__(
        self, video: str, is_id: bool = False, caption: str | None = None, **kwargs: Any
    ):
        super().__init__(video, is_id, caption=caption, **kwargs)

    @field_validator("caption")
    @classmethod
    def empty_caption_is_missing(cls, v):
        return v or None


class Document(Media):
    """Document message with optional caption and filename.

    Only PDF documents are supported for document-based message templates.
    """

    kind: ClassVar[str] = "document"

    caption: str | None = None
    filename: str | None = None

    def __init__(
        self,
        document: str,
        is_id: bool = False,
        caption: str | None = None,
        filename: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(document, is_id, caption=caption, filename=filename, **kwargs)

    @field_validator("caption", "filename")
    @classmethod
    def empty_value_is_missing(cls, v):
        return v or None
