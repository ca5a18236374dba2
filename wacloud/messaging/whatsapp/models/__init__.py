"""WhatsApp models package."""

from .base_models import ClientMessage, Section, check_limit
from .basic_models import MessageResult, Reaction, Text
from .catalog_models import CatalogProduct, Product, ProductSection
from .interactive_models import (
    ActionButtons,
    ActionCatalog,
    ActionCTA,
    ActionDataExchangeFlow,
    ActionFlow,
    ActionList,
    ActionLocation,
    ActionNavigateFlow,
    ActionProduct,
    ActionProductList,
    Body,
    Button,
    Footer,
    Header,
    Interactive,
    InteractiveAction,
    ListSection,
    Row,
)
from .media_models import Audio, Document, Image, Media, Sticker, Video
from .specialized_models import (
    Address,
    Birthday,
    ContactCard,
    ContactComponent,
    ContactComponentKind,
    Contacts,
    Email,
    Location,
    Name,
    Organization,
    Phone,
    Url,
)
from .template_models import (
    BodyComponent,
    BodyParameter,
    BuildContext,
    ButtonComponent,
    CarouselCard,
    CarouselComponent,
    CatalogComponent,
    CopyComponent,
    Currency,
    DateTime,
    FlowComponent,
    HeaderComponent,
    HeaderParameter,
    Language,
    LTOComponent,
    MPMComponent,
    PayloadComponent,
    SkipButtonComponent,
    TapTargetComponent,
    Template,
    TemplateComponent,
    URLComponent,
    build_components,
)

__all__ = [
    # Base
    "ClientMessage",
    "Section",
    "check_limit",
    # Basic
    "MessageResult",
    "Reaction",
    "Text",
    # Catalog
    "CatalogProduct",
    "Product",
    "ProductSection",
    # Media
    "Audio",
    "Document",
    "Image",
    "Media",
    "Sticker",
    "Video",
    # Specialized
    "Address",
    "Birthday",
    "ContactCard",
    "ContactComponent",
    "ContactComponentKind",
    "Contacts",
    "Email",
    "Location",
    "Name",
    "Organization",
    "Phone",
    "Url",
    # Interactive
    "ActionButtons",
    "ActionCatalog",
    "ActionCTA",
    "ActionDataExchangeFlow",
    "ActionFlow",
    "ActionList",
    "ActionLocation",
    "ActionNavigateFlow",
    "ActionProduct",
    "ActionProductList",
    "Body",
    "Button",
    "Footer",
    "Header",
    "Interactive",
    "InteractiveAction",
    "ListSection",
    "Row",
    # Template
    "BodyComponent",
    "BodyParameter",
    "BuildContext",
    "ButtonComponent",
    "CarouselCard",
    "CarouselComponent",
    "CatalogComponent",
    "CopyComponent",
    "Currency",
    "DateTime",
    "FlowComponent",
    "HeaderComponent",
    "HeaderParameter",
    "Language",
    "LTOComponent",
    "MPMComponent",
    "PayloadComponent",
    "SkipButtonComponent",
    "TapTargetComponent",
    "Template",
    "TemplateComponent",
    "URLComponent",
    "build_components",
]
