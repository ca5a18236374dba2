"""
Tests for the aiohttp based WhatsAppClient.
"""

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from wacloud.messaging.whatsapp.client import WhatsAppClient, WhatsAppUrlBuilder


def make_session(status: int = 200, body: dict | None = None) -> MagicMock:
    """aiohttp session stand-in whose post() yields a canned response."""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=body or {})
    response.text = AsyncMock(return_value="error body")
    if status >= 400:
        response.raise_for_status = MagicMock(
            side_effect=aiohttp.ClientResponseError(
                request_info=MagicMock(), history=(), status=status
            )
        )
    else:
        response.raise_for_status = MagicMock()

    session = MagicMock()
    session.post.return_value.__aenter__ = AsyncMock(return_value=response)
    session.post.return_value.__aexit__ = AsyncMock(return_value=False)
    return session


class TestWhatsAppUrlBuilder:
    """Test endpoint URLs."""

    def test_messages_url(self):
        builder = WhatsAppUrlBuilder("https://graph.facebook.com/", "v23.0", "123")
        assert builder.get_messages_url() == "https://graph.facebook.com/v23.0/123/messages"


class TestWhatsAppClient:
    """Test POST requests."""

    def test_requires_credentials(self):
        with pytest.raises(ValueError, match="requires an access token"):
            WhatsAppClient(MagicMock(), "", "123")

    @pytest.mark.asyncio
    async def test_post_request(self):
        session = make_session(body={"messages": [{"id": "wamid.1"}]})
        client = WhatsAppClient(
            session, "token", "123", base_url="https://graph.facebook.com/", api_version="v23.0"
        )

        response = await client.post_request({"messaging_product": "whatsapp"})

        assert response == {"messages": [{"id": "wamid.1"}]}
        session.post.assert_called_once_with(
            "https://graph.facebook.com/v23.0/123/messages",
            headers={
                "Authorization": "Bearer token",
                "Content-Type": "application/json",
            },
            json={"messaging_product": "whatsapp"},
        )

    @pytest.mark.asyncio
    async def test_http_error_is_raised(self):
        client = WhatsAppClient(make_session(status=401), "token", "123")

        with pytest.raises(aiohttp.ClientResponseError):
            await client.post_request({"messaging_product": "whatsapp"})
