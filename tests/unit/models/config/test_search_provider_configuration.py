"""Unit tests for SearchProviderConfiguration model."""

import pytest
from pydantic import ValidationError

from models.config import SearchProviderConfiguration


def test_search_provider_configuration_defaults() -> None:
    """Test default values."""
    cfg = SearchProviderConfiguration(api_key="key")
    assert cfg.max_results == 3
    assert cfg.timeout == 30.0


def test_search_provider_configuration_empty_api_key() -> None:
    """Test that empty API key is rejected."""
    with pytest.raises(ValidationError, match="API key must not be empty"):
        SearchProviderConfiguration(api_key="")


def test_search_provider_configuration_max_results_positive() -> None:
    """Test that at least one result has to be kept."""
    with pytest.raises(ValidationError):
        SearchProviderConfiguration(api_key="key", max_results=0)
