"""Constants used in business logic."""

# Default location of the service configuration file
DEFAULT_CONFIGURATION_FILE = "chat-service.yaml"

# Chat completion provider defaults (OpenAI-compatible API)
DEFAULT_CHAT_PROVIDER_URL = "https://api.groq.com/openai/v1"
DEFAULT_CHAT_MODEL = "openai/gpt-oss-20b"
DEFAULT_TEMPERATURE = 0.7

# Timeout in seconds applied to every outbound provider call
DEFAULT_PROVIDER_TIMEOUT = 30.0

# Number of web search results joined into the tool response
DEFAULT_SEARCH_MAX_RESULTS = 3
SEARCH_RESULTS_SEPARATOR = "\n\n"

# Upper bound on chat completion calls made while resolving one request
DEFAULT_MAX_ITERATIONS = 10

DEFAULT_SYSTEM_PROMPT = (
    "You are Abhijeet, a smart personal assistant. Be polite. "
    "You can use tools when needed."
)

# Tools offered to the model
WEB_SEARCH_TOOL_NAME = "webSearch"
TOOL_TYPE_FUNCTION = "function"
TOOL_CHOICE_AUTO = "auto"

# Cache types
CACHE_TYPE_NOOP = "noop"
CACHE_TYPE_MEMORY = "memory"

# Entries expire 24 hours after insertion
DEFAULT_CACHE_TTL = 60 * 60 * 24

# Message roles
ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLE_TOOL = "tool"

UNKNOWN_ERROR_MESSAGE = "Unknown error"
