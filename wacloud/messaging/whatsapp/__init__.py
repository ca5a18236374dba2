"""WhatsApp Cloud API messaging: models, client and messenger."""
