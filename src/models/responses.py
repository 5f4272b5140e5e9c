"""Models for REST API responses."""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field
from pydantic_core import SchemaError
from typing_extensions import Literal

import constants

INTERNAL_SERVER_ERROR_DESCRIPTION = "Internal server error"


class AbstractSuccessfulResponse(BaseModel):
    """Base class for all successful response models."""

    @classmethod
    def openapi_response(cls) -> dict[str, Any]:
        """Generate FastAPI response dict with a single example from model_config."""
        schema = cls.model_json_schema()
        model_examples = schema.get("examples")
        if not model_examples:
            raise SchemaError(f"Examples not found in {cls.__name__}")
        example_value = model_examples[0]
        content = {"application/json": {"example": example_value}}

        return {
            "description": "Successful response",
            "model": cls,
            "content": content,
        }


class ChatResponse(AbstractSuccessfulResponse):
    """Model representing the final answer returned by the chat endpoint.

    Attributes:
        role: Always "assistant".
        content: Text of the final answer.
    """

    role: Literal["assistant"] = Field(
        constants.ROLE_ASSISTANT,
        description="Author of the answer",
        examples=["assistant"],
    )

    content: str = Field(
        ...,
        description="Final answer produced by the model",
        examples=["4"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "role": "assistant",
                    "content": "2 + 2 equals 4.",
                }
            ]
        }
    }


class ComponentStatus(BaseModel):
    """Model representing the readiness of one service component.

    Attributes:
        component: Name of the component.
        ready: Whether the component can serve requests.
        message: Optional explanation.
    """

    component: str = Field(
        description="Name of the component",
        examples=["response cache", "chat provider"],
    )
    ready: bool = Field(
        description="Flag indicating if the component is ready",
    )
    message: str | None = Field(
        None,
        description="Optional message about the component status",
        examples=["Chat provider client is not initialised"],
    )


class ReadinessResponse(AbstractSuccessfulResponse):
    """Model representing response to a readiness request.

    Attributes:
        ready: If service is ready.
        reason: The reason for the readiness.
        components: List of components that are not ready.
    """

    ready: bool = Field(
        ...,
        description="Flag indicating if service is ready",
        examples=[True, False],
    )

    reason: str = Field(
        ...,
        description="The reason for the readiness",
        examples=["Service is ready"],
    )

    components: list[ComponentStatus] = Field(
        ...,
        description="List of components that are not ready.",
        examples=[],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "ready": True,
                    "reason": "Service is ready",
                    "components": [],
                }
            ]
        }
    }


class LivenessResponse(AbstractSuccessfulResponse):
    """Model representing a response to a liveness request.

    Attributes:
        alive: If app is alive.
    """

    alive: bool = Field(
        ...,
        description="Flag indicating that the app is alive",
        examples=[True, False],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "alive": True,
                }
            ]
        }
    }


class InfoResponse(AbstractSuccessfulResponse):
    """Model representing a response to an info request.

    Attributes:
        name: Service name.
        service_version: Service version.
        model: Model used for chat completions.
    """

    name: str = Field(
        description="Service name",
        examples=["Chat Service"],
    )

    service_version: str = Field(
        description="Service version",
        examples=["0.1.0", "0.2.0", "1.0.0"],
    )

    model: str = Field(
        description="Model used for chat completions",
        examples=["openai/gpt-oss-20b"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Chat Service",
                    "service_version": "0.1.0",
                    "model": "openai/gpt-oss-20b",
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """500 Internal Server Error.

    The chat endpoint reports every failure (invalid request body, provider
    failure, invalid tool arguments) with the same flat envelope.

    Attributes:
        error: Message of the underlying error.
    """

    description: ClassVar[str] = INTERNAL_SERVER_ERROR_DESCRIPTION

    error: str = Field(
        ...,
        description="Message describing the failure",
        examples=["Connection error.", "Request timed out."],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "label": "provider",
                    "error": "Connection error.",
                },
                {
                    "label": "request",
                    "error": "Invalid request body: 'messages' field required",
                },
                {
                    "label": "tool loop",
                    "error": "Tool-calling loop did not finish within 10 iterations",
                },
            ]
        }
    }

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorResponse":
        """Create an error response carrying the exception message."""
        return cls(error=str(exc) or constants.UNKNOWN_ERROR_MESSAGE)

    @classmethod
    def openapi_response(cls, examples: Optional[list[str]] = None) -> dict[str, Any]:
        """Generate FastAPI response dict with examples from model_config."""
        schema = cls.model_json_schema()
        model_examples = schema.get("examples", [])

        named_examples: dict[str, Any] = {}
        for ex in model_examples:
            label = ex.get("label", None)
            if label is None:
                raise SchemaError(f"Example {ex} in {cls.__name__} has no label")
            if examples is None or label in examples:
                named_examples[label] = {"value": {"error": ex.get("error")}}

        content: dict[str, Any] = {
            "application/json": {"examples": named_examples or None}
        }

        return {
            "description": cls.description,
            "model": cls,
            "content": content,
        }
