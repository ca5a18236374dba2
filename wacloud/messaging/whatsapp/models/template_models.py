"""
WhatsApp template message models.

Provides Pydantic v2 validation models for template messages:
- Template: The message itself (name, language and built components)
- HeaderComponent / BodyComponent: Variable substitution with typed parameters
- Button components: URL, quick reply payload, catalog, multi-product,
  copy code, flow and skipped (parameterless) buttons
- CarouselComponent / CarouselCard: Horizontally scrolling cards
- LTOComponent / TapTargetComponent: Limited time offers and tap targets

Components validate their own fields on construction. The cross-component
rules (body length depending on siblings, button indices, named vs numbered
variables) are applied by build_components() with a fresh BuildContext for
every Template or CarouselCard.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

from wacloud.core.logging.logger import get_logger

from .base_models import ClientMessage, check_limit, require_titles_when_many
from .catalog_models import Product, ProductSection
from .media_models import Document, Image, Video
from .specialized_models import Location

logger = get_logger(__name__)

_PARAMETER_NAME = re.compile(r"^[a-z_]{1,20}$")


@dataclass
class BuildContext:
    """State shared by the components of a single build.

    Never reused: every Template and CarouselCard creates its own.
    """

    theres_only_body: bool
    button_counter: int = 0
    variables_type: Literal["name", "number"] | None = None

    def next_button_index(self) -> int:
        index = self.button_counter
        self.button_counter += 1
        return index


class TemplateComponent(BaseModel):
    """Base class of everything a Template is made of."""

    model_config = ConfigDict(frozen=True)

    def build(self, context: BuildContext) -> dict[str, Any] | None:
        """Return the wire form of the component, or None to emit nothing."""
        return self.model_dump(mode="json", exclude_none=True)


def build_components(components: Sequence[TemplateComponent]) -> list[dict[str, Any]]:
    """Build an ordered component list, assigning button indices.

    Args:
        components: Template components in declaration order

    Returns:
        The built components, without the ones that emit nothing

    Raises:
        ValueError: If a cross-component rule is violated
    """
    context = BuildContext(
        theres_only_body=len(components) == 1 and isinstance(components[0], BodyComponent)
    )

    built = []
    seen: set[type[TemplateComponent]] = set()
    for component in components:
        if not isinstance(component, TemplateComponent):
            raise ValueError(
                f"Unsupported template component: {type(component).__name__}"
            )
        for single in SINGLE_COMPONENTS:
            if isinstance(component, single):
                if single in seen:
                    raise ValueError(
                        f"Template can't have more than one {single.__name__}"
                    )
                seen.add(single)
        result = component.build(context)
        if result is not None:
            built.append(result)

    logger.debug(
        f"Built {len(built)} template components "
        f"({context.button_counter} button slots, variables: {context.variables_type})"
    )
    return built


class Language(BaseModel):
    """Template language. Accepts both language and language_locale codes (en, en_US)."""

    model_config = ConfigDict(frozen=True)

    code: str
    policy: Literal["deterministic"] = "deterministic"

    def __init__(
        self, code: str, policy: Literal["deterministic"] = "deterministic", **kwargs: Any
    ):
        super().__init__(code=code, policy=policy, **kwargs)


class Currency(BaseModel):
    """Currency parameter value."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "currency"

    amount_1000: int
    code: str
    fallback_value: str

    def __init__(self, amount_1000: int, code: str, fallback_value: str, **kwargs: Any):
        super().__init__(
            amount_1000=amount_1000, code=code, fallback_value=fallback_value, **kwargs
        )

    @field_validator("amount_1000")
    @classmethod
    def validate_amount(cls, v):
        if v <= 0:
            raise ValueError("Currency must have an amount_1000 greater than 0")
        return v


class DateTime(BaseModel):
    """Date time parameter value. Cloud API always displays the fallback value."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "date_time"

    fallback_value: str

    def __init__(self, fallback_value: str, **kwargs: Any):
        super().__init__(fallback_value=fallback_value, **kwargs)


class TemplateNamedParameter(BaseModel):
    """Parameter that can be bound to a named template variable.

    ``type`` names the property ``value`` is written under.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    value: Any
    parameter_name: str | None = None

    def __init__(self, value: Any, parameter_name: str | None = None, **kwargs: Any):
        parameter_type = "text" if isinstance(value, str) else getattr(value, "kind", None)
        super().__init__(
            type=parameter_type, value=value, parameter_name=parameter_name, **kwargs
        )

    @field_validator("parameter_name")
    @classmethod
    def validate_parameter_name(cls, v):
        if not v:
            return None
        if not _PARAMETER_NAME.match(v):
            raise ValueError(
                "parameter_name can't be over 20 characters long "
                "and must contain only lowercase a-z and _"
            )
        return v

    @model_serializer
    def serialize_parameter(self, info: SerializationInfo) -> dict[str, Any]:
        value = (
            self.value
            if isinstance(self.value, str)
            else self.value.model_dump(mode=info.mode, exclude_none=True)
        )
        data: dict[str, Any] = {"type": self.type, self.type: value}
        if self.parameter_name is not None:
            data["parameter_name"] = self.parameter_name
        return data


class HeaderParameter(TemplateNamedParameter):
    """Header parameter: text, currency, date time, media, location or product."""

    type: Literal[
        "text", "currency", "date_time", "image", "document", "video", "location", "product"
    ]
    value: str | Currency | DateTime | Image | Document | Video | Location | Product

    @model_validator(mode="after")
    def validate_value(self):
        if isinstance(self.value, str) and len(self.value) > 60:
            raise ValueError("Header text must be 60 characters or less")
        if isinstance(self.value, Location) and not (self.value.name and self.value.address):
            raise ValueError("Header location must have a name and address")
        return self


class BodyParameter(TemplateNamedParameter):
    """Body parameter: text, currency or date time."""

    type: Literal["text", "currency", "date_time"]
    value: str | Currency | DateTime

    @model_validator(mode="after")
    def validate_value(self):
        if isinstance(self.value, str) and len(self.value) > 32768:
            raise ValueError("Body text must be 32768 characters or less")
        return self


def _check_variables_type(
    context: BuildContext, parameters: Sequence[TemplateNamedParameter]
) -> None:
    if not parameters:
        return
    if context.variables_type is None:
        context.variables_type = "name" if parameters[0].parameter_name else "number"

    named = context.variables_type == "name"
    if not all(bool(p.parameter_name) == named for p in parameters):
        raise ValueError(
            "Inconsistent use of named and numbered parameters in Template components"
        )


class HeaderComponent(TemplateComponent):
    """Header component holding the header variables."""

    type: Literal["header"] = "header"
    parameters: list[HeaderParameter]

    def __init__(self, *parameters: HeaderParameter, **kwargs: Any):
        super().__init__(parameters=list(parameters), **kwargs)

    def build(self, context: BuildContext) -> dict[str, Any]:
        _check_variables_type(context, self.parameters)
        return super().build(context)


class BodyComponent(TemplateComponent):
    """Body component holding the body variables.

    Text parameters are limited to 1024 characters unless the body is the
    only component of the template.
    """

    type: Literal["body"] = "body"
    parameters: list[BodyParameter]

    def __init__(self, *parameters: BodyParameter, **kwargs: Any):
        super().__init__(parameters=list(parameters), **kwargs)

    def build(self, context: BuildContext) -> dict[str, Any]:
        _check_variables_type(context, self.parameters)
        if not context.theres_only_body:
            for parameter in self.parameters:
                if isinstance(parameter.value, str) and len(parameter.value) > 1024:
                    raise ValueError("Body text must be 1024 characters or less")
        return super().build(context)


class ButtonComponent(TemplateComponent):
    """Base class of template buttons.

    The index of each button is its position among the template buttons,
    assigned at build time.
    """

    sub_type: ClassVar[str]

    def parameter(self) -> dict[str, Any]:
        raise NotImplementedError

    def build(self, context: BuildContext) -> dict[str, Any]:
        return {
            "type": "button",
            "sub_type": self.sub_type,
            "index": context.next_button_index(),
            "parameters": [self.parameter()],
        }


class URLComponent(ButtonComponent):
    """Dynamic URL button; ``text`` is appended to the URL suffix of the template."""

    sub_type: ClassVar[str] = "url"

    text: str

    def __init__(self, text: str, **kwargs: Any):
        super().__init__(text=text, **kwargs)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v):
        if not v:
            raise ValueError("Button parameter can't be an empty string")
        return v

    def parameter(self) -> dict[str, Any]:
        return {"type": "text", "text": self.text}


class PayloadComponent(ButtonComponent):
    """Quick reply button; the payload is returned in the webhook on click."""

    sub_type: ClassVar[str] = "quick_reply"

    payload: str

    def __init__(self, payload: str, **kwargs: Any):
        super().__init__(payload=payload, **kwargs)

    @field_validator("payload")
    @classmethod
    def validate_payload(cls, v):
        if not v:
            raise ValueError("Button parameter can't be an empty string")
        return v

    def parameter(self) -> dict[str, Any]:
        return {"type": "payload", "payload": self.payload}


class CatalogComponent(ButtonComponent):
    """Catalog button with a thumbnail product."""

    sub_type: ClassVar[str] = "catalog"

    thumbnail: Product

    def __init__(self, thumbnail: Product, **kwargs: Any):
        super().__init__(thumbnail=thumbnail, **kwargs)

    def parameter(self) -> dict[str, Any]:
        return {
            "type": "action",
            "action": {"thumbnail_product_retailer_id": self.thumbnail.product_retailer_id},
        }


class MPMComponent(ButtonComponent):
    """Multi-product message button: a thumbnail plus 1 to 10 product sections."""

    sub_type: ClassVar[str] = "mpm"

    thumbnail: Product
    sections: list[ProductSection]

    def __init__(self, thumbnail: Product, *sections: ProductSection, **kwargs: Any):
        super().__init__(thumbnail=thumbnail, sections=list(sections), **kwargs)

    @model_validator(mode="after")
    def validate_sections(self):
        check_limit("MPMComponent", "sections", self.sections, 10)
        require_titles_when_many(self.sections)
        return self

    def parameter(self) -> dict[str, Any]:
        return {
            "type": "action",
            "action": {
                "thumbnail_product_retailer_id": self.thumbnail.product_retailer_id,
                "sections": [
                    section.model_dump(mode="json", exclude_none=True)
                    for section in self.sections
                ],
            },
        }


class CopyComponent(ButtonComponent):
    """Copy code button carrying a coupon code."""

    sub_type: ClassVar[str] = "copy_code"

    coupon_code: str

    def __init__(self, coupon_code: str, **kwargs: Any):
        super().__init__(coupon_code=coupon_code, **kwargs)

    @field_validator("coupon_code")
    @classmethod
    def validate_coupon_code(cls, v):
        if not v:
            raise ValueError("Action coupon_code can't be an empty string")
        return v

    def parameter(self) -> dict[str, Any]:
        return {"type": "coupon_code", "coupon_code": self.coupon_code}


class FlowComponent(ButtonComponent):
    """Flow button with its token and optional initial data."""

    sub_type: ClassVar[str] = "flow"

    flow_token: str
    flow_action_data: dict[str, Any] | None = None

    def __init__(
        self,
        flow_token: str,
        flow_action_data: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(
            flow_token=flow_token, flow_action_data=flow_action_data, **kwargs
        )

    def parameter(self) -> dict[str, Any]:
        action: dict[str, Any] = {"flow_token": self.flow_token}
        if self.flow_action_data is not None:
            action["flow_action_data"] = self.flow_action_data
        return {"type": "action", "action": action}


class SkipButtonComponent(ButtonComponent):
    """Reserves a button index without emitting anything.

    Used for buttons that take no parameter, such as phone number buttons.
    """

    def build(self, context: BuildContext) -> None:
        context.next_button_index()
        return None


class CarouselCard(BaseModel):
    """Carousel card: a media header followed by the card components."""

    model_config = ConfigDict(frozen=True)

    components: list[dict[str, Any]]

    def __init__(
        self,
        header: Image | Video | Document | str,
        *components: TemplateComponent,
        **kwargs: Any,
    ):
        super().__init__(
            components=build_components(
                [HeaderComponent(HeaderParameter(header)), *components]
            ),
            **kwargs,
        )

    def build_card(self, card_index: int) -> dict[str, Any]:
        return {"card_index": card_index, "components": self.components}


class CarouselComponent(TemplateComponent):
    """Carousel of 1 to 10 cards, indexed by position."""

    cards: list[CarouselCard]

    def __init__(self, *cards: CarouselCard, **kwargs: Any):
        super().__init__(cards=list(cards), **kwargs)

    @field_validator("cards")
    @classmethod
    def validate_cards(cls, v):
        check_limit("CarouselComponent", "CarouselCard", v, 10)
        return v

    def build(self, context: BuildContext) -> dict[str, Any]:
        return {
            "type": "carousel",
            "cards": [card.build_card(index) for index, card in enumerate(self.cards)],
        }


class LTOComponent(TemplateComponent):
    """Limited time offer component."""

    expiration_time_ms: int

    def __init__(self, expiration_time_ms: int, **kwargs: Any):
        super().__init__(expiration_time_ms=expiration_time_ms, **kwargs)

    @field_validator("expiration_time_ms")
    @classmethod
    def validate_expiration(cls, v):
        if v < 0:
            raise ValueError("Expiration time must be a positive Unix timestamp")
        return v

    def build(self, context: BuildContext) -> dict[str, Any]:
        return {
            "type": "limited_time_offer",
            "parameters": [
                {
                    "type": "limited_time_offer",
                    "limited_time_offer": {"expiration_time_ms": self.expiration_time_ms},
                }
            ],
        }


class TapTargetComponent(TemplateComponent):
    """Tap target configuration: title and URL opened when the message is tapped."""

    title: str
    url: str

    def __init__(self, title: str, url: str, **kwargs: Any):
        super().__init__(title=title, url=url, **kwargs)

    def build(self, context: BuildContext) -> dict[str, Any]:
        return {
            "type": "tap_target_configuration",
            "parameters": [
                {
                    "type": "tap_target_configuration",
                    "tap_target_configuration": {"title": self.title, "url": self.url},
                }
            ],
        }


class Template(ClientMessage):
    """Template message.

    For text-based templates, the only supported component is BodyComponent.
    """

    kind: ClassVar[str] = "template"

    name: str
    language: Language
    components: list[dict[str, Any]] | None = None

    def __init__(
        self,
        name: str,
        language: str | Language,
        *components: TemplateComponent,
        **kwargs: Any,
    ):
        if isinstance(language, str):
            language = Language(language)
        super().__init__(
            name=name,
            language=language,
            components=build_components(components) if components else None,
            **kwargs,
        )

    @classmethod
    def otp(cls, name: str, language: str | Language, code: str) -> "Template":
        """Build an authentication template sending a one time password."""
        return cls(
            name,
            language,
            BodyComponent(BodyParameter(code)),
            URLComponent(code),
        )


# Components a Template (or CarouselCard) may hold at most once
SINGLE_COMPONENTS: tuple[type[TemplateComponent], ...] = (
    HeaderComponent,
    BodyComponent,
    CarouselComponent,
)
