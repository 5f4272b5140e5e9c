"""REST API endpoint handlers."""
