"""Model with service configuration."""

from pathlib import Path
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FilePath,
    NonNegativeFloat,
    PositiveFloat,
    PositiveInt,
    SecretStr,
    model_validator,
)
from typing_extensions import Self, Literal

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class CORSConfiguration(ConfigurationBase):
    """CORS configuration.

    The chat UI runs in a browser and is usually served from a different
    origin than this service, so cross-origin requests have to be allowed
    explicitly.

    Useful resources:

      - [CORS in FastAPI](https://fastapi.tiangolo.com/tutorial/cors/)
      - [Wikipedia article](https://en.wikipedia.org/wiki/Cross-origin_resource_sharing)
    """

    # not AnyHttpUrl: we need to support "*" that is not valid URL
    allow_origins: list[str] = Field(
        ["*"],
        title="Allow origins",
        description="A list of origins allowed for cross-origin requests. "
        "Use ['*'] to allow all origins.",
    )

    allow_credentials: bool = Field(
        False,
        title="Allow credentials",
        description="Indicate that cookies should be supported for cross-origin requests",
    )

    allow_methods: list[str] = Field(
        ["*"],
        title="Allow methods",
        description="A list of HTTP methods that should be allowed for "
        "cross-origin requests.",
    )

    allow_headers: list[str] = Field(
        ["*"],
        title="Allow headers",
        description="A list of HTTP request headers that should be supported "
        "for cross-origin requests.",
    )

    @model_validator(mode="after")
    def check_cors_configuration(self) -> Self:
        """Check CORS configuration."""
        # credentials are not allowed with wildcard origins per CORS/Fetch spec.
        if self.allow_credentials and "*" in self.allow_origins:
            raise ValueError(
                "Invalid CORS configuration: allow_credentials can not be set to true when "
                "allow origins contains the '*' wildcard. "
                "Use explicit origins or disable credentials."
            )
        return self


class ServiceConfiguration(ConfigurationBase):
    """Service configuration.

    The chat service is a REST API service that accepts requests on a
    specified hostname and port. When more Uvicorn workers are specified,
    each worker holds its own caches.
    """

    host: str = Field(
        "localhost",
        title="Host",
        description="Service hostname",
    )

    port: PositiveInt = Field(
        8080,
        title="Port",
        description="Service port",
    )

    workers: PositiveInt = Field(
        1,
        title="Number of workers",
        description="Number of Uvicorn worker processes to start",
    )

    color_log: bool = Field(
        True,
        title="Color log",
        description="Enables colorized logging",
    )

    access_log: bool = Field(
        True,
        title="Access log",
        description="Enables logging of all access information",
    )

    cors: CORSConfiguration = Field(
        default_factory=CORSConfiguration,
        title="CORS configuration",
        description="Cross-Origin Resource Sharing configuration for cross-domain requests",
    )

    @model_validator(mode="after")
    def check_service_configuration(self) -> Self:
        """Check service configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        return self


class ChatProviderConfiguration(ConfigurationBase):
    """Chat completion provider configuration.

    Any service implementing the OpenAI chat completions API with tool calling
    can be used. Groq is the default one.

    Useful resources:

      - [OpenAI Python library](https://github.com/openai/openai-python)
      - [Groq OpenAI compatibility](https://console.groq.com/docs/openai)
    """

    url: str = Field(
        constants.DEFAULT_CHAT_PROVIDER_URL,
        title="Base URL",
        description="Base URL of the OpenAI-compatible chat completion API",
    )

    api_key: SecretStr = Field(
        ...,
        title="API key",
        description="API key to access the chat completion API",
    )

    model: str = Field(
        constants.DEFAULT_CHAT_MODEL,
        min_length=1,
        title="Model",
        description="Identification of model used for chat completions",
    )

    temperature: NonNegativeFloat = Field(
        constants.DEFAULT_TEMPERATURE,
        title="Temperature",
        description="Sampling temperature passed with every completion request",
    )

    timeout: PositiveFloat = Field(
        constants.DEFAULT_PROVIDER_TIMEOUT,
        title="Timeout",
        description="Timeout in seconds for one chat completion call",
    )

    @model_validator(mode="after")
    def check_chat_provider_configuration(self) -> Self:
        """Check that the API key is not empty."""
        if not self.api_key.get_secret_value().strip():
            raise ValueError("Chat provider API key must not be empty")
        return self


class SearchProviderConfiguration(ConfigurationBase):
    """Web search provider configuration.

    Web search is performed by Tavily.

    Useful resources:

      - [Tavily Python SDK](https://github.com/tavily-ai/tavily-python)
    """

    api_key: SecretStr = Field(
        ...,
        title="API key",
        description="API key to access the web search API",
    )

    max_results: PositiveInt = Field(
        constants.DEFAULT_SEARCH_MAX_RESULTS,
        title="Max results",
        description="Number of top search results joined into the tool response",
    )

    timeout: PositiveFloat = Field(
        constants.DEFAULT_PROVIDER_TIMEOUT,
        title="Timeout",
        description="Timeout in seconds for one web search call",
    )

    @model_validator(mode="after")
    def check_search_provider_configuration(self) -> Self:
        """Check that the API key is not empty."""
        if not self.api_key.get_secret_value().strip():
            raise ValueError("Search provider API key must not be empty")
        return self


class OrchestratorConfiguration(ConfigurationBase):
    """Tool-calling loop configuration."""

    system_prompt: Optional[str] = Field(
        None,
        title="System prompt",
        description="System prompt prepended to every conversation",
    )

    system_prompt_path: Optional[FilePath] = Field(
        None,
        title="System prompt path",
        description="Path to a file with the system prompt",
    )

    max_iterations: PositiveInt = Field(
        constants.DEFAULT_MAX_ITERATIONS,
        title="Max iterations",
        description="Maximum number of chat completion calls made for one request",
    )

    @model_validator(mode="after")
    def check_orchestrator_configuration(self) -> Self:
        """Load system prompt from file when a path is given."""
        if self.system_prompt is not None and self.system_prompt_path is not None:
            raise ValueError(
                "Only one of system_prompt and system_prompt_path can be set"
            )
        if self.system_prompt_path is not None:
            self.system_prompt = Path(self.system_prompt_path).read_text(
                encoding="utf-8"
            )
        return self

    @property
    def effective_system_prompt(self) -> str:
        """Return the configured system prompt or the default one."""
        if self.system_prompt is None:
            return constants.DEFAULT_SYSTEM_PROMPT
        return self.system_prompt


class InMemoryCacheConfig(ConfigurationBase):
    """In-memory cache configuration."""

    ttl: PositiveInt = Field(
        constants.DEFAULT_CACHE_TTL,
        title="Time to live",
        description="Number of seconds after which an entry is treated as expired",
    )

    max_entries: Optional[PositiveInt] = Field(
        None,
        title="Max entries",
        description="Maximum number of entries stored in the in-memory cache; "
        "unbounded when not set",
    )


class CacheConfiguration(ConfigurationBase):
    """Configuration of one cache (response cache or search cache)."""

    type: Literal["noop", "memory"] = Field(
        constants.CACHE_TYPE_MEMORY,
        title="Cache type",
        description="Type of cache; 'noop' disables caching",
    )

    memory: InMemoryCacheConfig = Field(
        default_factory=InMemoryCacheConfig,
        title="In-memory cache configuration",
        description="In-memory cache configuration",
    )


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str = Field(
        ...,
        title="Service name",
        description="Name of the service. That value will be used in REST API endpoints.",
    )

    service: ServiceConfiguration = Field(
        default_factory=ServiceConfiguration,
        title="Service configuration",
        description="This section contains chat service configuration.",
    )

    chat_provider: ChatProviderConfiguration = Field(
        ...,
        title="Chat provider configuration",
        description="OpenAI-compatible chat completion API used to answer messages.",
    )

    search_provider: SearchProviderConfiguration = Field(
        ...,
        title="Search provider configuration",
        description="Web search API used by the webSearch tool.",
    )

    orchestrator: OrchestratorConfiguration = Field(
        default_factory=OrchestratorConfiguration,
        title="Orchestrator configuration",
        description="System prompt and limits of the tool-calling loop.",
    )

    response_cache: CacheConfiguration = Field(
        default_factory=CacheConfiguration,
        title="Response cache configuration",
        description="Cache mapping conversations to final answers.",
    )

    search_cache: CacheConfiguration = Field(
        default_factory=CacheConfiguration,
        title="Search cache configuration",
        description="Cache mapping search queries to condensed search results.",
    )

    def dump(self, filename: str = "configuration.json") -> None:
        """Dump actual configuration into JSON file."""
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
