"""Chat service REST API application."""
