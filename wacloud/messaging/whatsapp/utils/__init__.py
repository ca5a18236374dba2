"""WhatsApp utility functions and helpers.

Error helpers depend on the message models and are imported from
``wacloud.messaging.whatsapp.utils.error_helpers`` directly.
"""

from wacloud.messaging.whatsapp.utils.emoji import contains_emoji, is_single_emoji

__all__ = [
    "contains_emoji",
    "is_single_emoji",
]
