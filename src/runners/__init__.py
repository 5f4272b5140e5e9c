"""Runners started by the service entry point."""
