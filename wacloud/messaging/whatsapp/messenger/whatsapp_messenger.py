"""
WhatsApp messenger: sends any validated message through a WhatsAppClient.

Message objects are validated on construction, so the messenger only wraps
their payload in the /messages request envelope, posts it and reports the
outcome as a MessageResult. Send failures are logged and returned, never
raised.
"""

from typing import Any

from wacloud.core.logging.context import clear_send_context, set_send_context
from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.base_models import ClientMessage
from wacloud.messaging.whatsapp.models.basic_models import MessageResult
from wacloud.messaging.whatsapp.utils.error_helpers import handle_whatsapp_error


class WhatsAppMessenger:
    """Sends messages and read receipts for one WhatsApp phone number."""

    def __init__(self, client: WhatsAppClient):
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def phone_id(self) -> str:
        return self.client.phone_number_id

    @staticmethod
    def build_request(
        to: str, message: ClientMessage, reply_to_message_id: str | None = None
    ) -> dict[str, Any]:
        """Wrap a message payload in the /messages request envelope.

        Args:
            to: Recipient phone number
            message: Any validated message object
            reply_to_message_id: Optional message ID to reply to

        Returns:
            The JSON-ready request body
        """
        kind = message.kind
        request: dict[str, Any] = {
            "messaging_product": "whatsapp",
            "to": to,
            "type": kind,
            kind: message.to_payload(),
        }
        if reply_to_message_id:
            request["context"] = {"message_id": reply_to_message_id}
        return request

    async def send_message(
        self,
        to: str,
        message: ClientMessage,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        """Send a message.

        Args:
            to: Recipient phone number
            message: Any validated message object
            reply_to_message_id: Optional message ID to reply to

        Returns:
            MessageResult with operation status and metadata
        """
        set_send_context(phone_id=self.phone_id, recipient=to)
        try:
            payload = self.build_request(to, message, reply_to_message_id)

            self.logger.debug(f"Sending {message.kind} message")
            response = await self.client.post_request(payload)

            message_id = (response.get("messages") or [{}])[0].get("id")
            self.logger.info(
                f"{message.kind.capitalize()} message sent successfully, id: {message_id}"
            )

            return MessageResult(
                success=True,
                message_id=message_id,
                recipient=to,
                message_type=message.kind,
                phone_id=self.phone_id,
            )

        except Exception as e:
            return handle_whatsapp_error(
                error=e,
                operation=f"send {message.kind} message",
                recipient=to,
                phone_id=self.phone_id,
                logger=self.logger,
                message_type=message.kind,
            )
        finally:
            clear_send_context()

    async def mark_as_read(self, message_id: str) -> MessageResult:
        """Mark a received message as read.

        Args:
            message_id: WhatsApp message ID to mark as read

        Returns:
            MessageResult with operation status and metadata
        """
        set_send_context(phone_id=self.phone_id)
        try:
            read_payload = {
                "messaging_product": "whatsapp",
                "status": "read",
                "message_id": message_id,
            }

            self.logger.debug(f"Marking message {message_id} as read")
            await self.client.post_request(read_payload)
            self.logger.info(f"Message {message_id} marked as read")

            return MessageResult(
                success=True, message_id=message_id, phone_id=self.phone_id
            )

        except Exception as e:
            return handle_whatsapp_error(
                error=e,
                operation="mark as read",
                recipient=message_id,
                phone_id=self.phone_id,
                logger=self.logger,
            )
        finally:
            clear_send_context()
