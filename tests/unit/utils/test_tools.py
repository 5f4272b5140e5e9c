"""Unit tests for the tool dispatcher."""

import json

import pytest
from pydantic import ValidationError
from pytest_mock import MockerFixture

from models.chat import FunctionCall, ToolCall
from utils.tools import WEB_SEARCH_TOOL, ToolDispatcher, create_tool_dispatcher


def make_tool_call(
    name: str = "webSearch",
    arguments: str = '{"query": "weather Paris"}',
    call_type: str = "function",
) -> ToolCall:
    """Build a tool call requested by the model."""
    return ToolCall(
        id="call_1",
        type=call_type,
        function=FunctionCall(name=name, arguments=arguments),
    )


def test_web_search_tool_declaration() -> None:
    """Test the declaration of the webSearch tool offered to the model."""
    assert WEB_SEARCH_TOOL == {
        "type": "function",
        "function": {
            "name": "webSearch",
            "description": "Search the web for current information",
            "parameters": {
                "type": "object",
                "properties": {"query": {"type": "string"}},
                "required": ["query"],
            },
        },
    }


def test_tool_names(mocker: MockerFixture) -> None:
    """Test that registered tools are listed."""
    dispatcher = create_tool_dispatcher(mocker.AsyncMock())
    assert dispatcher.tool_names == ["webSearch"]


@pytest.mark.asyncio
async def test_dispatch_web_search(mocker: MockerFixture) -> None:
    """Test that webSearch call produces a tool message."""
    web_search = mocker.AsyncMock()
    web_search.search.return_value = "It is sunny."
    dispatcher = create_tool_dispatcher(web_search)

    message = await dispatcher.dispatch(make_tool_call())

    assert message is not None
    assert message.role == "tool"
    assert message.tool_call_id == "call_1"
    assert message.name == "webSearch"
    assert message.content == "It is sunny."
    web_search.search.assert_awaited_once_with("weather Paris")


@pytest.mark.asyncio
async def test_dispatch_ignores_extra_arguments(mocker: MockerFixture) -> None:
    """Test that arguments other than query are ignored."""
    web_search = mocker.AsyncMock()
    web_search.search.return_value = "result"
    dispatcher = create_tool_dispatcher(web_search)

    await dispatcher.dispatch(
        make_tool_call(arguments='{"query": "q", "max_results": 10}')
    )

    web_search.search.assert_awaited_once_with("q")


@pytest.mark.asyncio
async def test_dispatch_unknown_function(mocker: MockerFixture) -> None:
    """Test that call to an unknown function is skipped."""
    web_search = mocker.AsyncMock()
    dispatcher = create_tool_dispatcher(web_search)

    assert await dispatcher.dispatch(make_tool_call(name="getWeather")) is None
    web_search.search.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_not_a_function(mocker: MockerFixture) -> None:
    """Test that tool call of other type than function is skipped."""
    web_search = mocker.AsyncMock()
    dispatcher = create_tool_dispatcher(web_search)

    assert await dispatcher.dispatch(make_tool_call(call_type="custom")) is None
    web_search.search.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_invalid_json(mocker: MockerFixture) -> None:
    """Test that arguments that are not valid JSON are reported."""
    web_search = mocker.AsyncMock()
    dispatcher = create_tool_dispatcher(web_search)

    with pytest.raises(json.JSONDecodeError):
        await dispatcher.dispatch(make_tool_call(arguments="{query: weather"))
    web_search.search.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", ["{}", '{"query": 42}', '{"q": "x"}'])
async def test_dispatch_invalid_arguments(
    mocker: MockerFixture, arguments: str
) -> None:
    """Test that arguments not matching the tool are reported."""
    web_search = mocker.AsyncMock()
    dispatcher = create_tool_dispatcher(web_search)

    with pytest.raises(ValidationError):
        await dispatcher.dispatch(make_tool_call(arguments=arguments))
    web_search.search.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_search_error(mocker: MockerFixture) -> None:
    """Test that search error propagates."""
    web_search = mocker.AsyncMock()
    web_search.search.side_effect = RuntimeError("Search provider failed")
    dispatcher = create_tool_dispatcher(web_search)

    with pytest.raises(RuntimeError, match="Search provider failed"):
        await dispatcher.dispatch(make_tool_call())


@pytest.mark.asyncio
async def test_custom_handler() -> None:
    """Test dispatching to a handler registered directly."""

    async def echo(arguments: dict) -> str:
        return arguments["text"]

    dispatcher = ToolDispatcher({"echo": echo})
    message = await dispatcher.dispatch(
        make_tool_call(name="echo", arguments='{"text": "hello"}')
    )

    assert message is not None
    assert message.content == "hello"
