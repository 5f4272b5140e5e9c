"""Utilities used by the chat service."""
