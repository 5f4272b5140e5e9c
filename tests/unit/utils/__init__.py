"""Unit tests for utils."""
