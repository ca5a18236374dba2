"""
WhatsApp Cloud API HTTP client.

Key Design Decisions:
- The aiohttp session is injected and owned by the caller
- One client per sending phone_number_id
- HTTP errors are logged and re-raised; turning them into results is the
  messenger's job
"""

from typing import Any

import aiohttp

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger


class WhatsAppUrlBuilder:
    """Builds URLs for WhatsApp Cloud API endpoints."""

    def __init__(self, base_url: str, api_version: str, phone_number_id: str):
        """Initialize URL builder with configuration.

        Args:
            base_url: Graph API base URL
            api_version: WhatsApp API version
            phone_number_id: Sending phone number ID
        """
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.phone_number_id = phone_number_id

    def get_messages_url(self) -> str:
        """Build URL for sending messages."""
        return f"{self.base_url}/{self.api_version}/{self.phone_number_id}/messages"


class WhatsAppClient:
    """
    WhatsApp Cloud API client bound to one phone number.

    Only JSON POST requests are needed to send messages and read receipts.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        access_token: str,
        phone_number_id: str,
        logger: Any | None = None,
        api_version: str = settings.api_version,
        base_url: str = settings.base_url,
    ):
        """Initialize WhatsApp client with dependency injection.

        Args:
            session: Persistent aiohttp session, closed by the caller
            access_token: WhatsApp Cloud API access token
            phone_number_id: Sending phone number ID
            logger: Pre-configured logger instance
            api_version: WhatsApp API version to use
            base_url: Graph API base URL
        """
        if not access_token:
            raise ValueError("WhatsAppClient requires an access token")
        if not phone_number_id:
            raise ValueError("WhatsAppClient requires a phone number id")

        self.session = session
        self.access_token = access_token
        self.phone_number_id = phone_number_id
        self.logger = logger or get_logger(__name__)
        self.url_builder = WhatsAppUrlBuilder(base_url, api_version, phone_number_id)

        self.logger.info(
            f"WhatsApp client initialized for phone_id: {self.phone_number_id}, "
            f"api_version: {api_version}"
        )

    @classmethod
    def from_settings(
        cls, session: aiohttp.ClientSession, logger: Any | None = None
    ) -> "WhatsAppClient":
        """Create a client from WP_ACCESS_TOKEN / WP_PHONE_ID."""
        access_token, phone_number_id = settings.require_credentials()
        return cls(
            session,
            access_token,
            phone_number_id,
            logger=logger,
            api_version=settings.api_version,
            base_url=settings.base_url,
        )

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    async def post_request(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send POST request to WhatsApp API.

        Args:
            payload: JSON payload for the request

        Returns:
            JSON response from WhatsApp API

        Raises:
            aiohttp.ClientResponseError: For HTTP errors
            Exception: For other request failures
        """
        url = self.url_builder.get_messages_url()

        self.logger.debug(f"Sending JSON request to {url}")
        self.logger.debug(f"Payload: {payload}")

        try:
            async with self.session.post(
                url, headers=self._get_headers(), json=payload
            ) as response:
                if response.status >= 400:
                    error_text = await response.text()
                    self._log_http_error(response.status, url, error_text)
                response.raise_for_status()
                response_data = await response.json()
                self.logger.debug(f"Response: {response_data}")
                return response_data

        except aiohttp.ClientResponseError:
            raise
        except Exception as err:
            self.logger.error(
                f"Unexpected error for phone_id {self.phone_number_id}: {err}"
            )
            raise

    def _log_http_error(self, status: int, url: str, error_text: str) -> None:
        if status == 401:
            self.logger.error(
                "CRITICAL: WHATSAPP ACCESS TOKEN EXPIRED OR INVALID! "
                f"Phone id {self.phone_number_id} authentication FAILED - 401 Unauthorized"
            )
            self.logger.error(f"Token starts with: {self.access_token[:20]}...")
            self.logger.error(f"URL: {url}")
            self.logger.error(f"Response: {error_text}")
            self.logger.error(
                "ACTION REQUIRED: Update WP_ACCESS_TOKEN in environment variables!"
            )
        else:
            self.logger.error(
                f"HTTP error for phone_id {self.phone_number_id}: {status} - {error_text}"
            )
            self.logger.debug(f"Failed URL: {url}")
