"""Unit tests for models defined in models/requests.py."""

import json

import pytest
from pydantic import ValidationError

from models.requests import ChatMessage, ChatRequest


class TestChatRequest:
    """Test cases for the ChatRequest model."""

    def test_constructor(self) -> None:
        """Test the ChatRequest constructor."""
        request = ChatRequest(
            messages=[ChatMessage(role="user", content="What is 2+2?")]
        )
        assert len(request.messages) == 1
        assert request.messages[0].role == "user"
        assert request.messages[0].content == "What is 2+2?"

    def test_from_dict(self) -> None:
        """Test that request body is parsed."""
        request = ChatRequest.model_validate(
            {
                "messages": [
                    {"role": "user", "content": "Hi"},
                    {"role": "assistant", "content": "Hello"},
                ]
            }
        )
        assert [m.role for m in request.messages] == ["user", "assistant"]

    def test_empty_conversation(self) -> None:
        """Test that empty conversation is accepted."""
        request = ChatRequest(messages=[])
        assert request.cache_key() == "[]"

    @pytest.mark.parametrize("role", ["system", "tool", "robot"])
    def test_invalid_role(self, role: str) -> None:
        """Test that the UI can send only user and assistant messages."""
        with pytest.raises(ValidationError):
            ChatRequest.model_validate({"messages": [{"role": role, "content": "x"}]})

    def test_missing_messages(self) -> None:
        """Test that messages are required."""
        with pytest.raises(ValidationError, match="messages"):
            ChatRequest.model_validate({})

    def test_missing_content(self) -> None:
        """Test that message content is required."""
        with pytest.raises(ValidationError, match="content"):
            ChatRequest.model_validate({"messages": [{"role": "user"}]})


class TestChatRequestCacheKey:
    """Test cases for the response cache key."""

    def test_cache_key_format(self) -> None:
        """Test that the key is a compact JSON array of role/content objects."""
        request = ChatRequest(
            messages=[
                ChatMessage(role="user", content="Hi"),
                ChatMessage(role="assistant", content="Hello"),
            ]
        )
        assert request.cache_key() == (
            '[{"role":"user","content":"Hi"},{"role":"assistant","content":"Hello"}]'
        )

    def test_cache_key_is_stable(self) -> None:
        """Test that equal conversations produce equal keys."""
        body = '{"messages": [ {"role": "user",   "content": "What is 2+2?"} ]}'
        compact = '{"messages":[{"role":"user","content":"What is 2+2?"}]}'
        assert (
            ChatRequest.model_validate_json(body).cache_key()
            == ChatRequest.model_validate_json(compact).cache_key()
        )

    def test_cache_key_depends_on_order(self) -> None:
        """Test that reordered messages produce a different key."""
        first = ChatMessage(role="user", content="A")
        second = ChatMessage(role="user", content="B")
        assert (
            ChatRequest(messages=[first, second]).cache_key()
            != ChatRequest(messages=[second, first]).cache_key()
        )

    def test_cache_key_depends_on_content(self) -> None:
        """Test that whitespace inside content is significant."""
        assert (
            ChatRequest(messages=[ChatMessage(role="user", content="Hi")]).cache_key()
            != ChatRequest(
                messages=[ChatMessage(role="user", content="Hi ")]
            ).cache_key()
        )

    def test_cache_key_depends_on_role(self) -> None:
        """Test that role is part of the key."""
        assert (
            ChatRequest(messages=[ChatMessage(role="user", content="Hi")]).cache_key()
            != ChatRequest(
                messages=[ChatMessage(role="assistant", content="Hi")]
            ).cache_key()
        )

    def test_cache_key_non_ascii(self) -> None:
        """Test that non-ASCII content is kept as is."""
        request = ChatRequest(messages=[ChatMessage(role="user", content="Příliš žluťoučký")])
        key = request.cache_key()
        assert "Příliš žluťoučký" in key
        assert json.loads(key) == [{"role": "user", "content": "Příliš žluťoučký"}]
