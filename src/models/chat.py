"""Models for messages exchanged with the chat completion provider."""

from typing import Any, Optional

from pydantic import BaseModel, Field
from typing_extensions import Literal

import constants


class FunctionCall(BaseModel):
    """Function name and JSON-encoded arguments requested by the model."""

    name: str
    arguments: str = "{}"


class ToolCall(BaseModel):
    """Model representing a tool invocation requested by the model.

    Attributes:
        id: Opaque identifier echoed back in the tool result message.
        type: Kind of tool; only "function" is dispatched.
        function: Name and serialized arguments of the function.
    """

    id: str
    type: str = constants.TOOL_TYPE_FUNCTION
    function: FunctionCall

    @classmethod
    def from_provider(cls, tool_call: Any) -> "ToolCall":
        """Build the model from a tool call object returned by the OpenAI client."""
        function = getattr(tool_call, "function", None)
        return cls(
            id=tool_call.id,
            type=getattr(tool_call, "type", constants.TOOL_TYPE_FUNCTION),
            function=FunctionCall(
                name=getattr(function, "name", ""),
                arguments=getattr(function, "arguments", None) or "{}",
            ),
        )


class Message(BaseModel):
    """One message of the working conversation.

    Attributes:
        role: Author of the message.
        content: Message text; assistant turns requesting tools may have none.
        tool_call_id: For tool results, the ID of the tool call answered.
        name: For tool results, the name of the tool that produced it.
        tool_calls: For assistant turns, the tool calls the model requested.
    """

    role: Literal["system", "user", "assistant", "tool"]
    content: Optional[str] = None
    tool_call_id: Optional[str] = None
    name: Optional[str] = None
    tool_calls: Optional[list[ToolCall]] = None

    def to_provider(self) -> dict[str, Any]:
        """Convert the message into the payload expected by the provider."""
        return self.model_dump(exclude_none=True)


class FinalAnswer(BaseModel):
    """Assistant message the model returns when it requests no further tools."""

    role: Literal["assistant"] = Field(constants.ROLE_ASSISTANT)
    content: str = Field("")
