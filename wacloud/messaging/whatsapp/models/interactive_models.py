"""
Interactive message models for WhatsApp messaging.

Pydantic schemas for interactive messages based on WhatsApp Cloud API
documentation. An Interactive message combines one action with an optional
body, header and footer; the action decides the interactive type:

1. ActionButtons - Quick reply buttons (max 3)
2. ActionList - Sectioned lists with rows (max 10 sections, 10 rows each)
3. ActionProduct / ActionProductList / ActionCatalog - Catalog messages
4. ActionCTA - Call-to-action URL button
5. ActionNavigateFlow / ActionDataExchangeFlow - WhatsApp Flows
6. ActionLocation - Location request
"""

import re
from collections.abc import Sequence
from typing import Any, ClassVar, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    field_serializer,
    field_validator,
    model_serializer,
    model_validator,
)

from wacloud.messaging.whatsapp.utils.emoji import contains_emoji

from .base_models import ClientMessage, Section, check_limit, require_titles_when_many
from .catalog_models import CatalogProduct, Product, ProductSection
from .media_models import Media

_EDGE_SPACE = re.compile(r"^ | $")

# Actions whose header, when present, must be a text header
TEXT_HEADER_ACTIONS = frozenset({"list", "product_list", "cta_url", "flow"})


class InteractiveAction(BaseModel):
    """Base class of every interactive action; ``kind`` is the interactive type."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str]


class Body(BaseModel):
    """Body of an interactive message. Maximum length: 1024 characters."""

    model_config = ConfigDict(frozen=True)

    text: str

    def __init__(self, text: str, **kwargs: Any):
        super().__init__(text=text, **kwargs)

    @field_validator("text")
    @classmethod
    def validate_text_length(cls, v):
        if len(v) > 1024:
            raise ValueError("Body text must be 1024 characters or less")
        return v


class Footer(BaseModel):
    """Footer of an interactive message. Maximum length: 60 characters."""

    model_config = ConfigDict(frozen=True)

    text: str

    def __init__(self, text: str, **kwargs: Any):
        super().__init__(text=text, **kwargs)

    @field_validator("text")
    @classmethod
    def validate_text_length(cls, v):
        if len(v) > 60:
            raise ValueError("Footer text must be 60 characters or less")
        return v


class Header(BaseModel):
    """Header of an interactive message: text or a caption-less media object."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text", "image", "video", "document"]
    value: str | Media

    def __init__(self, value: str | Media, **kwargs: Any):
        header_type = "text" if isinstance(value, str) else getattr(value, "kind", None)
        super().__init__(type=header_type, value=value, **kwargs)

    @model_validator(mode="after")
    def validate_header(self):
        if isinstance(self.value, str):
            if len(self.value) > 60:
                raise ValueError("Header text must be 60 characters or less")
        elif getattr(self.value, "caption", None):
            raise ValueError(f"Header {self.type} must not have a caption")
        return self

    @model_serializer
    def serialize_header(self, info: SerializationInfo) -> dict[str, Any]:
        value = (
            self.value
            if isinstance(self.value, str)
            else self.value.model_dump(mode=info.mode, exclude_none=True)
        )
        return {"type": self.type, self.type: value}


class ButtonReply(BaseModel):
    """Reply payload of a quick reply button."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        if len(v) > 256:
            raise ValueError("Button id must be 256 characters or less")
        if _EDGE_SPACE.search(v):
            raise ValueError("Button id cannot have leading or trailing spaces")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v:
            raise ValueError("Button title cannot be an empty string")
        if len(v) > 20:
            raise ValueError("Button title must be 20 characters or less")
        return v


class Button(BaseModel):
    """Quick reply button for ActionButtons.

    The id is returned in the webhook when the button is clicked.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["reply"] = "reply"
    reply: ButtonReply

    def __init__(self, id: str, title: str, **kwargs: Any):
        super().__init__(reply=ButtonReply(id=id, title=title), **kwargs)


class ActionButtons(InteractiveAction):
    """Reply buttons action: 1 to 3 buttons with unique ids and titles."""

    kind: ClassVar[str] = "button"

    buttons: list[Button]

    def __init__(self, *buttons: Button, **kwargs: Any):
        super().__init__(buttons=list(buttons), **kwargs)

    @model_validator(mode="after")
    def validate_buttons(self):
        check_limit("Reply buttons", "button", self.buttons, 3)

        ids = [button.reply.id for button in self.buttons]
        if len(ids) != len(set(ids)):
            raise ValueError("Reply buttons must have unique ids")

        titles = [button.reply.title for button in self.buttons]
        if len(titles) != len(set(titles)):
            raise ValueError("Reply buttons must have unique titles")
        return self


class Row(BaseModel):
    """Row of a list section."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str | None = None

    def __init__(
        self, id: str, title: str, description: str | None = None, **kwargs: Any
    ):
        super().__init__(id=id, title=title, description=description, **kwargs)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        if len(v) > 200:
            raise ValueError("Row id must be 200 characters or less")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v:
            raise ValueError("Row must have a title")
        if len(v) > 24:
            raise ValueError("Row title must be 24 characters or less")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        if v and len(v) > 72:
            raise ValueError("Row description must be 72 characters or less")
        return v or None


class ListSection(Section):
    """Section of up to 10 rows. The title is required when a list has several sections."""

    section_name: ClassVar[str] = "ListSection"
    child_name: ClassVar[str] = "rows"
    max_elements: ClassVar[int] = 10

    rows: list[Row]

    def __init__(self, title: str | None, *rows: Row, **kwargs: Any):
        super().__init__(title=title, rows=list(rows), **kwargs)

    def elements(self) -> Sequence[Row]:
        return self.rows


class ActionList(InteractiveAction):
    """List action: a button label opening 1 to 10 sections."""

    kind: ClassVar[str] = "list"

    button: str
    sections: list[ListSection]

    def __init__(self, button: str, *sections: ListSection, **kwargs: Any):
        super().__init__(button=button, sections=list(sections), **kwargs)

    @model_validator(mode="after")
    def validate_list(self):
        check_limit("Action", "sections", self.sections, 10)
        if not self.button:
            raise ValueError("Button content cannot be an empty string")
        if len(self.button) > 20:
            raise ValueError("Button content must be 20 characters or less")
        require_titles_when_many(self.sections)
        return self


class ActionProduct(InteractiveAction):
    """Single product message action."""

    kind: ClassVar[str] = "product"

    catalog_id: str
    product_retailer_id: str

    def __init__(self, catalog_id: str, product: Product, **kwargs: Any):
        super().__init__(
            catalog_id=catalog_id,
            product_retailer_id=product.product_retailer_id,
            **kwargs,
        )

    @classmethod
    def from_catalog_product(cls, product: CatalogProduct) -> "ActionProduct":
        """Build the action from a product that already knows its catalog."""
        return cls(product.catalog_id, product)

    @field_validator("catalog_id")
    @classmethod
    def validate_catalog_id(cls, v):
        if not v:
            raise ValueError("ActionProduct must have a catalog_id")
        return v


class ActionProductList(InteractiveAction):
    """Multi-product message action: 1 to 10 product sections."""

    kind: ClassVar[str] = "product_list"

    catalog_id: str
    sections: list[ProductSection]

    def __init__(self, catalog_id: str, *sections: ProductSection, **kwargs: Any):
        super().__init__(catalog_id=catalog_id, sections=list(sections), **kwargs)

    @model_validator(mode="after")
    def validate_sections(self):
        check_limit("ActionProductList", "sections", self.sections, 10)
        require_titles_when_many(self.sections)
        return self


class ActionCatalog(InteractiveAction):
    """Catalog message action, optionally featuring a thumbnail product."""

    kind: ClassVar[str] = "catalog_message"

    name: Literal["catalog_message"] = "catalog_message"
    parameters: dict[str, str] | None = None

    def __init__(self, thumbnail: Product | None = None, **kwargs: Any):
        if thumbnail is not None:
            kwargs["parameters"] = {
                "thumbnail_product_retailer_id": thumbnail.product_retailer_id
            }
        super().__init__(**kwargs)


class ActionCTA(InteractiveAction):
    """Call-to-action URL button."""

    kind: ClassVar[str] = "cta_url"

    name: Literal["cta_url"] = "cta_url"
    parameters: dict[str, str]

    def __init__(self, display_text: str, url: str, **kwargs: Any):
        super().__init__(parameters={"display_text": display_text, "url": url}, **kwargs)

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, v):
        if not v.get("display_text"):
            raise ValueError("CTA display_text cannot be an empty string")
        if not v.get("url"):
            raise ValueError("CTA url cannot be an empty string")
        return v


class ActionFlow(InteractiveAction):
    """Flow action. Use ActionNavigateFlow or ActionDataExchangeFlow."""

    kind: ClassVar[str] = "flow"

    name: Literal["flow"] = "flow"
    parameters: dict[str, Any]

    @field_validator("parameters")
    @classmethod
    def validate_flow_cta(cls, v):
        flow_cta = v.get("flow_cta") or ""
        if not flow_cta or len(flow_cta) > 20:
            raise ValueError("Flow CTA must be between 1 and 20 characters")
        if contains_emoji(flow_cta):
            raise ValueError("Flow CTA must not contain emoji")
        return v


class ActionNavigateFlow(ActionFlow):
    """Flow action opening a given screen of a published (or draft) flow."""

    def __init__(
        self,
        flow_token: str,
        flow_id: str,
        flow_cta: str,
        screen: str,
        data: dict[str, Any] | None = None,
        mode: Literal["published", "draft"] = "published",
        flow_message_version: str = "3",
        **kwargs: Any,
    ):
        if data is not None and not data:
            raise ValueError("Flow data must be a non-empty object if provided")

        payload: dict[str, Any] = {"screen": screen}
        if data is not None:
            payload["data"] = data

        super().__init__(
            parameters={
                "mode": mode,
                "flow_message_version": flow_message_version,
                "flow_token": flow_token,
                "flow_id": flow_id,
                "flow_cta": flow_cta,
                "flow_action": "navigate",
                "flow_action_payload": payload,
            },
            **kwargs,
        )


class ActionDataExchangeFlow(ActionFlow):
    """Flow action whose first screen is requested from the business endpoint."""

    def __init__(
        self,
        flow_token: str,
        flow_id: str,
        flow_cta: str,
        mode: Literal["published", "draft"] = "published",
        flow_message_version: str = "3",
        **kwargs: Any,
    ):
        super().__init__(
            parameters={
                "mode": mode,
                "flow_message_version": flow_message_version,
                "flow_token": flow_token,
                "flow_id": flow_id,
                "flow_cta": flow_cta,
                "flow_action": "data_exchange",
            },
            **kwargs,
        )


class ActionLocation(InteractiveAction):
    """Location request action: asks the user to share their location."""

    kind: ClassVar[str] = "location_request_message"

    name: Literal["send_location"] = "send_location"


class Interactive(ClientMessage):
    """Interactive message.

    Rules, checked in order:
    - a body is required unless the action is a single product
    - a single product action can't have a header
    - a product list action requires a text header
    - list, product list, CTA and flow actions only accept text headers
    """

    kind: ClassVar[str] = "interactive"

    type: str
    action: InteractiveAction
    body: Body | None = None
    header: Header | None = None
    footer: Footer | None = None

    def __init__(
        self,
        action: InteractiveAction,
        body: Body | None = None,
        header: Header | None = None,
        footer: Footer | None = None,
        **kwargs: Any,
    ):
        super().__init__(
            type=getattr(action, "kind", ""),
            action=action,
            body=body,
            header=header,
            footer=footer,
            **kwargs,
        )

    @model_validator(mode="after")
    def validate_composition(self):
        kind = self.action.kind

        if kind != "product" and self.body is None:
            raise ValueError("Interactive must have a body component")
        if kind == "product" and self.header is not None:
            raise ValueError(
                "Interactive must not have a header component if action is a single product"
            )
        if kind == "product_list" and (self.header is None or self.header.type != "text"):
            raise ValueError(
                "Interactive must have a Text header component if action is a product list"
            )
        if self.header is not None and kind in TEXT_HEADER_ACTIONS:
            if self.header.type != "text":
                raise ValueError(f"Header of type text is required for {kind} action")
        return self

    @field_serializer("action")
    def serialize_action(self, action: InteractiveAction, info: SerializationInfo):
        return action.model_dump(mode=info.mode, exclude_none=True)
