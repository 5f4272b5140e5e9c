"""Configuration loader."""

import logging
from typing import Any, Optional

import yaml

from cache.cache import Cache
from cache.cache_factory import CacheFactory
from models.config import (
    CacheConfiguration,
    ChatProviderConfiguration,
    Configuration,
    OrchestratorConfiguration,
    SearchProviderConfiguration,
    ServiceConfiguration,
)
from utils.env_vars import replace_env_vars

logger = logging.getLogger(__name__)


class LogicError(Exception):
    """Error in application logic."""


class AppConfig:
    """Singleton class to load and store the configuration.

    Besides the validated configuration it owns the process-wide caches:
    the response cache and the search cache are created lazily on first
    access and shared by all requests served by the process.
    """

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance.

        Sets placeholders for the loaded configuration and the lazily-created
        caches.
        """
        self._configuration: Optional[Configuration] = None
        self._response_cache: Optional[Cache[str]] = None
        self._search_cache: Optional[Cache[str]] = None

    def load_configuration(self, filename: str) -> None:
        """Load configuration from YAML file.

        Parameters:
            filename (str): Path to the YAML configuration file to load.

        Raises:
            EnvVarError: If a referenced environment variable is not set.
            pydantic.ValidationError: If the configuration is not valid, for
            example when a provider API key is missing.
        """
        with open(filename, encoding="utf-8") as fin:
            config_dict = yaml.safe_load(fin)
            config_dict = replace_env_vars(config_dict)
            self.init_from_dict(config_dict)
            logger.info("Loaded configuration from %s", filename)

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary.

        Parameters:
            config_dict (dict[Any, Any]): Mapping of configuration values
            (typically parsed from YAML) to construct a new Configuration
            instance. Any previously created caches are dropped so they will
            be reinitialized on next access.
        """
        # clear cached values when configuration changes
        self._response_cache = None
        self._search_cache = None
        # now it is possible to re-read configuration
        self._configuration = Configuration(**config_dict)

    def is_loaded(self) -> bool:
        """Return True when a configuration has been loaded."""
        return self._configuration is not None

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def service_configuration(self) -> ServiceConfiguration:
        """Return service configuration."""
        return self.configuration.service

    @property
    def chat_provider_configuration(self) -> ChatProviderConfiguration:
        """Return chat completion provider configuration."""
        return self.configuration.chat_provider

    @property
    def search_provider_configuration(self) -> SearchProviderConfiguration:
        """Return web search provider configuration."""
        return self.configuration.search_provider

    @property
    def orchestrator_configuration(self) -> OrchestratorConfiguration:
        """Return tool-calling loop configuration."""
        return self.configuration.orchestrator

    @property
    def response_cache_configuration(self) -> CacheConfiguration:
        """Return response cache configuration."""
        return self.configuration.response_cache

    @property
    def search_cache_configuration(self) -> CacheConfiguration:
        """Return search cache configuration."""
        return self.configuration.search_cache

    @property
    def response_cache(self) -> Cache[str]:
        """Return the cache mapping serialized conversations to final answers.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._response_cache is None:
            self._response_cache = CacheFactory.cache(
                self.configuration.response_cache
            )
        return self._response_cache

    @property
    def search_cache(self) -> Cache[str]:
        """Return the cache mapping search queries to condensed results.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._search_cache is None:
            self._search_cache = CacheFactory.cache(self.configuration.search_cache)
        return self._search_cache


configuration: AppConfig = AppConfig()
