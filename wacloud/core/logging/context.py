"""
Send context management using contextvars for automatic propagation.

The messenger sets the phone number id and recipient once per send; every
logger obtained through get_logger() picks them up without manual passing.
"""

from contextvars import ContextVar

_phone_context: ContextVar[str | None] = ContextVar(
    "phone_id", default=None
)  # Sending business phone number id
_recipient_context: ContextVar[str | None] = ContextVar(
    "recipient", default=None
)  # Message recipient


def set_send_context(
    phone_id: str | None = None,
    recipient: str | None = None,
) -> None:
    """
    Set the send context for the current async context.

    Args:
        phone_id: WhatsApp Business phone number id sending the message
        recipient: Recipient phone number or WhatsApp id
    """
    if phone_id is not None:
        _phone_context.set(phone_id)
    if recipient is not None:
        _recipient_context.set(recipient)


def get_current_phone_context() -> str | None:
    """Get the current phone number id from context variables."""
    return _phone_context.get()


def get_current_recipient_context() -> str | None:
    """Get the current recipient from context variables."""
    return _recipient_context.get()


def clear_send_context() -> None:
    """Reset both context variables for the current context."""
    _phone_context.set(None)
    _recipient_context.set(None)
