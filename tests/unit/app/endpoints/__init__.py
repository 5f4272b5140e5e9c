"""Unit tests for app endpoints."""
