"""
Pytest configuration and common fixtures for wacloud tests.

Provides shared fixtures and configuration for all test modules.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from wacloud.messaging.whatsapp.models import Image, Product, ProductSection


@pytest.fixture
def mock_client():
    """WhatsAppClient stand-in whose post_request returns a sent message id."""
    client = MagicMock()
    client.phone_number_id = "test_phone_id"
    client.post_request = AsyncMock(
        return_value={
            "messaging_product": "whatsapp",
            "contacts": [{"input": "5491100000000", "wa_id": "5491100000000"}],
            "messages": [{"id": "wamid.TEST"}],
        }
    )
    return client


@pytest.fixture
def image_header() -> Image:
    return Image("https://example.com/header.png")


@pytest.fixture
def product_sections() -> list[ProductSection]:
    return [
        ProductSection("Shoes", Product("sku-1"), Product("sku-2")),
        ProductSection("Hats", Product("sku-3")),
    ]


# Environment setup for tests
@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("ENVIRONMENT", "DEV")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("WP_PHONE_ID", "test_phone_id")
    monkeypatch.setenv("WP_ACCESS_TOKEN", "test_token")
