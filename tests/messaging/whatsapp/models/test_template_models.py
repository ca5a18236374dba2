"""
Tests for template messages, their components and the build pipeline.
"""

import pytest

from wacloud.messaging.whatsapp.models import (
    BodyComponent,
    BodyParameter,
    CarouselCard,
    CarouselComponent,
    CatalogComponent,
    CatalogProduct,
    CopyComponent,
    Currency,
    DateTime,
    FlowComponent,
    HeaderComponent,
    HeaderParameter,
    Image,
    Language,
    Location,
    LTOComponent,
    MPMComponent,
    PayloadComponent,
    Product,
    ProductSection,
    SkipButtonComponent,
    TapTargetComponent,
    Template,
    URLComponent,
    build_components,
)


class TestTemplate:
    """Test the template message itself."""

    def test_without_components(self):
        assert Template("hello_world", "en_US").to_payload() == {
            "name": "hello_world",
            "language": {"code": "en_US", "policy": "deterministic"},
        }

    def test_language_object(self):
        template = Template("hello_world", Language("es"))
        assert template.language.code == "es"

    def test_variables(self):
        template = Template(
            "order_update",
            "en",
            HeaderComponent(HeaderParameter("Hello")),
            BodyComponent(
                BodyParameter("John"),
                BodyParameter(Currency(1500, "USD", "U$1.5")),
                BodyParameter(DateTime("01/01/2023")),
            ),
        )

        assert template.to_payload()["components"] == [
            {"type": "header", "parameters": [{"type": "text", "text": "Hello"}]},
            {
                "type": "body",
                "parameters": [
                    {"type": "text", "text": "John"},
                    {
                        "type": "currency",
                        "currency": {
                            "amount_1000": 1500,
                            "code": "USD",
                            "fallback_value": "U$1.5",
                        },
                    },
                    {"type": "date_time", "date_time": {"fallback_value": "01/01/2023"}},
                ],
            },
        ]

    def test_otp(self):
        template = Template.otp("auth_code", "en", "123456")

        assert template.to_payload()["components"] == [
            {"type": "body", "parameters": [{"type": "text", "text": "123456"}]},
            {
                "type": "button",
                "sub_type": "url",
                "index": 0,
                "parameters": [{"type": "text", "text": "123456"}],
            },
        ]

    def test_build_is_deterministic(self):
        template = Template("t", "en", BodyComponent(BodyParameter("x")), URLComponent("a"))
        assert template.build() == template.build()


class TestComponentCardinality:
    """Test components a template may hold only once."""

    def test_duplicate_body(self):
        with pytest.raises(ValueError, match="Template can't have more than one BodyComponent"):
            Template(
                "t",
                "en",
                BodyComponent(BodyParameter("a")),
                BodyComponent(BodyParameter("b")),
            )

    def test_duplicate_header(self):
        with pytest.raises(
            ValueError, match="Template can't have more than one HeaderComponent"
        ):
            Template(
                "t",
                "en",
                HeaderComponent(HeaderParameter("a")),
                HeaderComponent(HeaderParameter("b")),
                BodyComponent(BodyParameter("c")),
            )

    def test_duplicate_carousel(self, image_header):
        carousel = CarouselComponent(CarouselCard(image_header, URLComponent("a")))
        with pytest.raises(
            ValueError, match="Template can't have more than one CarouselComponent"
        ):
            Template("t", "en", BodyComponent(BodyParameter("b")), carousel, carousel)

    def test_card_with_second_header(self, image_header):
        with pytest.raises(
            ValueError, match="Template can't have more than one HeaderComponent"
        ):
            CarouselCard(image_header, HeaderComponent(HeaderParameter("extra")))

    def test_many_buttons_allowed(self):
        template = Template("t", "en", URLComponent("a"), URLComponent("b"))
        assert len(template.components) == 2


class TestBodyLength:
    """Test the body limit depending on sibling components."""

    def test_sole_body_allows_long_text(self):
        template = Template("t", "en", BodyComponent(BodyParameter("x" * 2000)))
        assert len(template.components) == 1

    def test_body_with_header_is_limited(self):
        with pytest.raises(ValueError, match="Body text must be 1024 characters or less"):
            Template(
                "t",
                "en",
                HeaderComponent(HeaderParameter("Hi")),
                BodyComponent(BodyParameter("x" * 2000)),
            )

    def test_body_parameter_hard_limit(self):
        with pytest.raises(ValueError, match="Body text must be 32768 characters or less"):
            BodyParameter("x" * 32769)


class TestButtonIndices:
    """Test positional button indices."""

    def test_skip_button_reserves_index(self):
        template = Template(
            "t", "en", URLComponent("a"), SkipButtonComponent(), PayloadComponent("b")
        )

        buttons = template.to_payload()["components"]
        assert len(buttons) == 2
        assert [button["index"] for button in buttons] == [0, 2]
        assert buttons[1] == {
            "type": "button",
            "sub_type": "quick_reply",
            "index": 2,
            "parameters": [{"type": "payload", "payload": "b"}],
        }

    def test_each_template_counts_from_zero(self):
        first = Template("t", "en", URLComponent("a"))
        second = Template("t", "en", URLComponent("a"))
        assert first.components == second.components

    def test_empty_button_parameter(self):
        with pytest.raises(ValueError, match="Button parameter can't be an empty string"):
            URLComponent("")
        with pytest.raises(ValueError, match="Button parameter can't be an empty string"):
            PayloadComponent("")


class TestButtonComponents:
    """Test the parameters of each button type."""

    def test_catalog(self):
        (button,) = build_components([CatalogComponent(Product("sku-1"))])

        assert button == {
            "type": "button",
            "sub_type": "catalog",
            "index": 0,
            "parameters": [
                {"type": "action", "action": {"thumbnail_product_retailer_id": "sku-1"}}
            ],
        }

    def test_mpm(self, product_sections):
        (button,) = build_components([MPMComponent(Product("sku-1"), *product_sections)])

        action = button["parameters"][0]["action"]
        assert button["sub_type"] == "mpm"
        assert action["thumbnail_product_retailer_id"] == "sku-1"
        assert [section["title"] for section in action["sections"]] == ["Shoes", "Hats"]

    def test_mpm_section_limit(self):
        sections = [ProductSection(f"S{i}", Product(f"sku-{i}")) for i in range(11)]
        with pytest.raises(ValueError, match="MPMComponent can't have more than 10 sections"):
            MPMComponent(Product("sku-1"), *sections)

    def test_mpm_single_untitled_section(self):
        section = ProductSection(None, Product("sku-1"))
        (button,) = build_components([MPMComponent(Product("sku-1"), section)])

        assert button["parameters"][0]["action"]["sections"] == [
            {"product_items": [{"product_retailer_id": "sku-1"}]}
        ]

    def test_mpm_sections_need_titles(self):
        with pytest.raises(ValueError, match="All sections must have a title"):
            MPMComponent(
                Product("sku-1"),
                ProductSection("Shoes", Product("sku-1")),
                ProductSection(None, Product("sku-2")),
            )

    def test_copy_code(self):
        (button,) = build_components([CopyComponent("SAVE20")])

        assert button["sub_type"] == "copy_code"
        assert button["parameters"] == [{"type": "coupon_code", "coupon_code": "SAVE20"}]

    def test_empty_copy_code(self):
        with pytest.raises(ValueError, match="Action coupon_code can't be an empty string"):
            CopyComponent("")

    def test_flow(self):
        (button,) = build_components([FlowComponent("token-1", {"step": 1})])

        assert button["sub_type"] == "flow"
        assert button["parameters"] == [
            {
                "type": "action",
                "action": {"flow_token": "token-1", "flow_action_data": {"step": 1}},
            }
        ]


class TestParameters:
    """Test header and body parameters."""

    def test_header_text_limit(self):
        with pytest.raises(ValueError, match="Header text must be 60 characters or less"):
            HeaderParameter("x" * 61)

    def test_header_location_requires_name_and_address(self):
        with pytest.raises(ValueError, match="Header location must have a name and address"):
            HeaderParameter(Location(0, 0, name="Somewhere"))

    def test_header_image(self):
        parameter = HeaderParameter(Image("https://example.com/a.png"))

        assert parameter.model_dump(mode="json") == {
            "type": "image",
            "image": {"link": "https://example.com/a.png"},
        }

    def test_header_product_keeps_catalog(self):
        parameter = HeaderParameter(CatalogProduct("sku-1", "catalog-1"))

        assert parameter.model_dump(mode="json") == {
            "type": "product",
            "product": {"product_retailer_id": "sku-1", "catalog_id": "catalog-1"},
        }

    def test_currency_amount(self):
        with pytest.raises(
            ValueError, match="Currency must have an amount_1000 greater than 0"
        ):
            Currency(0, "USD", "U$0")

    def test_parameter_name(self):
        parameter = BodyParameter("John", parameter_name="first_name")

        assert parameter.model_dump(mode="json") == {
            "type": "text",
            "text": "John",
            "parameter_name": "first_name",
        }

    @pytest.mark.parametrize("name", ["FirstName", "first-name", "a" * 21])
    def test_invalid_parameter_name(self, name):
        with pytest.raises(ValueError, match="parameter_name can't be over 20 characters long"):
            BodyParameter("John", parameter_name=name)

    def test_empty_parameter_name_is_numbered(self):
        parameter = BodyParameter("John", parameter_name="")

        assert parameter.parameter_name is None
        assert Template("t", "en", BodyComponent(parameter)).components == [
            {"type": "body", "parameters": [{"type": "text", "text": "John"}]}
        ]

    def test_named_parameters_across_components(self):
        template = Template(
            "t",
            "en",
            HeaderComponent(HeaderParameter("Hi", "greeting")),
            BodyComponent(BodyParameter("John", "first_name")),
        )
        assert len(template.components) == 2

    def test_mixed_named_and_numbered(self):
        with pytest.raises(
            ValueError,
            match="Inconsistent use of named and numbered parameters in Template components",
        ):
            Template(
                "t",
                "en",
                HeaderComponent(HeaderParameter("Hi", "greeting")),
                BodyComponent(BodyParameter("John")),
            )


class TestCarousel:
    """Test carousel cards."""

    def test_cards(self, image_header):
        carousel = CarouselComponent(
            CarouselCard(image_header, URLComponent("a")),
            CarouselCard(image_header, PayloadComponent("b")),
        )
        template = Template("t", "en", BodyComponent(BodyParameter("Hi")), carousel)

        cards = template.to_payload()["components"][1]["cards"]
        assert [card["card_index"] for card in cards] == [0, 1]
        assert cards[0]["components"][0] == {
            "type": "header",
            "parameters": [
                {"type": "image", "image": {"link": "https://example.com/header.png"}}
            ],
        }
        # Buttons are indexed per card
        assert cards[1]["components"][1]["index"] == 0

    def test_too_many_cards(self, image_header):
        cards = [CarouselCard(image_header) for _ in range(11)]
        with pytest.raises(
            ValueError, match="CarouselComponent can't have more than 10 CarouselCard"
        ):
            CarouselComponent(*cards)


class TestOfferComponents:
    """Test limited time offer and tap target components."""

    def test_lto(self):
        (component,) = build_components([LTOComponent(1700000000000)])

        assert component == {
            "type": "limited_time_offer",
            "parameters": [
                {
                    "type": "limited_time_offer",
                    "limited_time_offer": {"expiration_time_ms": 1700000000000},
                }
            ],
        }

    def test_lto_negative(self):
        with pytest.raises(
            ValueError, match="Expiration time must be a positive Unix timestamp"
        ):
            LTOComponent(-1)

    def test_tap_target(self):
        (component,) = build_components(
            [TapTargetComponent("Open", "https://example.com")]
        )

        assert component["parameters"][0]["tap_target_configuration"] == {
            "title": "Open",
            "url": "https://example.com",
        }
