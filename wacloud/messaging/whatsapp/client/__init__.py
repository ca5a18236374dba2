"""WhatsApp client package."""

from .whatsapp_client import WhatsAppClient, WhatsAppUrlBuilder

__all__ = ["WhatsAppClient", "WhatsAppUrlBuilder"]
