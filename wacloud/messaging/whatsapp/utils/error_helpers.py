"""
WhatsApp error handling utilities.

Provides centralized error handling for send operations, including
authentication error detection and standardized failed MessageResults.
"""

import aiohttp

from wacloud.messaging.whatsapp.models.basic_models import MessageResult


def is_authentication_error(error: Exception) -> bool:
    """Check if an exception indicates an authentication failure.

    Args:
        error: The exception to check

    Returns:
        True if the error indicates authentication failure (401/Unauthorized)
    """
    if isinstance(error, aiohttp.ClientResponseError):
        return error.status == 401
    error_str = str(error)
    return "401" in error_str or "Unauthorized" in error_str


def get_error_code(error: Exception) -> int | None:
    """HTTP status of a failed API call, if the error carries one."""
    if isinstance(error, aiohttp.ClientResponseError):
        return error.status
    return None


def handle_whatsapp_error(
    error: Exception,
    operation: str,
    recipient: str,
    phone_id: str,
    logger,
    message_type: str | None = None,
    include_traceback: bool = False,
) -> MessageResult:
    """Log a failed WhatsApp operation and turn it into a MessageResult.

    Args:
        error: The exception that occurred
        operation: Description of the operation that failed (e.g., "send text message")
        recipient: The recipient identifier (phone number or message ID)
        phone_id: The sending phone_number_id, for logging context
        logger: Logger instance for error logging
        message_type: Kind of the message that failed, if any
        include_traceback: Whether to include full traceback in log (exc_info=True)

    Returns:
        MessageResult with success=False and appropriate error details
    """
    if is_authentication_error(error):
        logger.error(f"CRITICAL: WhatsApp Authentication Failed - Cannot {operation}!")
        logger.error(f"Check WhatsApp access token for phone id {phone_id}")

    logger.error(
        f"Failed to {operation} to {recipient}: {error}", exc_info=include_traceback
    )

    return MessageResult(
        success=False,
        recipient=recipient,
        message_type=message_type,
        error=str(error),
        error_code=get_error_code(error),
        phone_id=phone_id,
    )
