"""Pydantic models for configuration, REST API and provider messages."""
