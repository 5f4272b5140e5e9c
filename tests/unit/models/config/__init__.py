"""Unit tests for models config."""
