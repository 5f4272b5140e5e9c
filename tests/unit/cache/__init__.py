"""Unit tests for cache."""
