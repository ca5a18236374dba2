"""Messaging platforms supported by wacloud."""
