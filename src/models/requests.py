"""Models for REST API requests."""

import json

from pydantic import BaseModel, Field
from typing_extensions import Literal


class ChatMessage(BaseModel):
    """One message of the conversation as sent by the chat UI.

    Attributes:
        role: Who wrote the message; the UI never sends system messages.
        content: Text of the message.
    """

    role: Literal["user", "assistant"] = Field(
        ...,
        description="Author of the message",
        examples=["user", "assistant"],
    )
    content: str = Field(
        ...,
        description="Message text",
        examples=["What is 2+2?"],
    )


class ChatRequest(BaseModel):
    """Model representing a request sent to the chat endpoint.

    Attributes:
        messages: Conversation so far, oldest message first.

    Example:
        ```python
        request = ChatRequest(messages=[ChatMessage(role="user", content="Hi")])
        ```
    """

    messages: list[ChatMessage] = Field(
        ...,
        description="Conversation so far, in chronological order",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "messages": [
                        {"role": "user", "content": "What is 2+2?"},
                    ]
                },
                {
                    "messages": [
                        {"role": "user", "content": "Hi"},
                        {"role": "assistant", "content": "Hello! How can I help?"},
                        {"role": "user", "content": "What is the weather in Paris?"},
                    ]
                },
            ]
        }
    }

    def cache_key(self) -> str:
        """Serialize the messages into the response cache key.

        Role and content pairs are serialized in request order with compact
        separators. Whitespace of the raw request body does not affect the
        key, any change of order, role or content does.

        Returns:
            str: JSON array of role/content objects.
        """
        return json.dumps(
            [message.model_dump() for message in self.messages],
            separators=(",", ":"),
            ensure_ascii=False,
        )
