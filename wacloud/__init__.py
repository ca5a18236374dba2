"""
wacloud - WhatsApp Cloud API client.

Build validated messages and send them:

    from wacloud import Text, WhatsAppClient, WhatsAppMessenger

    async with aiohttp.ClientSession() as session:
        messenger = WhatsAppMessenger(WhatsAppClient.from_settings(session))
        await messenger.send_message("5491100000000", Text("Hello!"))
"""

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger, setup_app_logging, setup_logging
from wacloud.messaging.whatsapp.client import WhatsAppClient
from wacloud.messaging.whatsapp.messenger import WhatsAppMessenger
from wacloud.messaging.whatsapp.models import *  # noqa: F403
from wacloud.messaging.whatsapp.models import __all__ as _models_all

__version__ = settings.version

__all__ = [
    "__version__",
    "get_logger",
    "settings",
    "setup_app_logging",
    "setup_logging",
    "WhatsAppClient",
    "WhatsAppMessenger",
    *_models_all,
]
