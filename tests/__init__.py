"""Tests for the chat service."""
